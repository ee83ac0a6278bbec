"""
Record models for PlaneDB.

Both record types are immutable once built by a loader.
"""

from planedb.models.type_info import TypeInfo, CATEGORY_TABLE, describe_category
from planedb.models.plane_info import PlaneInfo

__all__ = [
    'TypeInfo',
    'PlaneInfo',
    'CATEGORY_TABLE',
    'describe_category',
]
