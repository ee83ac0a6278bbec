"""
PlaneDb context - owns the type and registration indexes.

Lifecycle:
    UNINITIALIZED -> LOADING -> READY -> CLOSED

Construction loads ACFTREF.txt then MASTER.txt. If either load fails
the partially built indexes are released and PlaneDbError is raised,
so a caller never holds a half-loaded database.

Usage:
    from planedb.database import init_db, close_db

    db = init_db()
    plane = db.lookup('a1b2c3') if db else None
    print(db.render(plane))
    close_db(db)
"""

import logging
from enum import Enum
from typing import Optional

from planedb.config import config
from planedb.exceptions import PlaneDbError
from planedb.index import TypeIndex, RegistrationIndex
from planedb.ingestion.fields import parse_hex
from planedb.models import TypeInfo, PlaneInfo
from planedb.render import format_plane_info

logger = logging.getLogger(__name__)


class DbState(str, Enum):
    """Lifecycle states of a PlaneDb context."""
    UNINITIALIZED = 'uninitialized'
    LOADING = 'loading'
    READY = 'ready'
    CLOSED = 'closed'


class PlaneDb:
    """
    In-memory FAA registration database.

    Not thread-safe; share between threads only behind a lock.
    """

    def __init__(self, types_path: Optional[str] = None, planes_path: Optional[str] = None):
        self.state = DbState.UNINITIALIZED
        self.types_path = str(types_path or config.data.types_path)
        self.planes_path = str(planes_path or config.data.planes_path)

        self.types: Optional[TypeIndex] = None
        self.planes: Optional[RegistrationIndex] = None

        self._load()

    def _load(self) -> None:
        self.state = DbState.LOADING
        try:
            self.types = TypeIndex(self.types_path)
            self.types.load()
            self.planes = RegistrationIndex(self.planes_path)
            self.planes.load()
        except PlaneDbError as e:
            self.close()
            raise PlaneDbError(f'Could not initialize plane database: {e}') from e

        self.state = DbState.READY
        logger.info(f'Plane database ready: {len(self.types)} types, {len(self.planes)} registrations')

    @property
    def is_ready(self) -> bool:
        return self.state == DbState.READY

    def lookup(self, icao: Optional[str]) -> Optional[PlaneInfo]:
        """
        Search the registration index for an ICAO hex string.

        Returns None for an empty code, a miss, or a database that is
        not ready. The code is not trimmed; leading whitespace parses
        as id 0.
        """
        if not icao or not self.is_ready:
            return None
        return self.planes.lookup(parse_hex(icao))

    def lookup_type(self, model_id: int) -> Optional[TypeInfo]:
        """Search the type index by model id."""
        if not self.is_ready:
            return None
        return self.types.lookup(model_id)

    def resolve(self, plane: PlaneInfo) -> Optional[TypeInfo]:
        """Type record for a registration, None when the model is unknown."""
        return self.lookup_type(plane.model_id)

    def render(self, plane: Optional[PlaneInfo]) -> str:
        """Render a registration together with its resolved type."""
        if plane is None:
            return format_plane_info(None)
        return format_plane_info(plane, self.resolve(plane))

    def close(self) -> None:
        """
        Release both indexes, registrations first.

        Safe to call more than once.
        """
        if self.state == DbState.CLOSED:
            return
        if self.planes is not None:
            self.planes.clear()
            self.planes = None
        if self.types is not None:
            self.types.clear()
            self.types = None
        self.state = DbState.CLOSED

    @property
    def stats(self) -> dict:
        """Get database statistics."""
        return {
            'state': self.state.value,
            'types': self.types.stats if self.types is not None else None,
            'registrations': self.planes.stats if self.planes is not None else None,
        }

    def __enter__(self) -> 'PlaneDb':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f'<PlaneDb {self.state.value} {self.types_path} {self.planes_path}>'


def init_db(types_path: Optional[str] = None, planes_path: Optional[str] = None) -> Optional[PlaneDb]:
    """
    Create and load a PlaneDb.

    Returns None if the database could not be initialized; hosts treat
    that as a database where every lookup misses.
    """
    try:
        return PlaneDb(types_path, planes_path)
    except PlaneDbError as e:
        logger.error(str(e))
        return None


def close_db(db: Optional[PlaneDb]) -> None:
    """Close db; a None or already-closed context is a no-op."""
    if db is None:
        return
    db.close()
