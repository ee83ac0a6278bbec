"""
PlaneDB Package.

In-memory lookup of FAA aircraft registration and type reference data.

Modules:
    ingestion/   Fixed-width field extraction and record loaders
    models/      Immutable record types (TypeInfo, PlaneInfo)
    api/         REST endpoints for registration and type lookups
    index.py     Keyed record indexes with a most-recent lookup slot
    database.py  PlaneDb context owning both indexes
    render.py    Plain-text rendering of lookup results
    cli.py       Standalone `planedb <icao>` command
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
