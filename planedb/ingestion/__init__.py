"""
Data ingestion module for PlaneDB.

Handles fixed-width field extraction and loading of the FAA
ACFTREF.txt and MASTER.txt files into records.
"""

from planedb.ingestion.fields import parse_hex, parse_int, pickup
from planedb.ingestion.loaders import RecordLoader, TypeLoader, RegistrationLoader

__all__ = [
    'parse_hex',
    'parse_int',
    'pickup',
    'RecordLoader',
    'TypeLoader',
    'RegistrationLoader',
]
