"""
Keyed record indexes with a most-recent lookup slot.

Records are stored in a dict keyed by their numeric id. In front of the
dict sits a single slot remembering the last key that resolved and its
record; repeated lookups of the same key are answered from the slot.
The slot only ever reflects a successful lookup and the dict remains
the source of truth.

Not thread-safe: the slot is unsynchronized mutable state, so callers
sharing an index between threads must serialize access.
"""

import logging
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from planedb.exceptions import PlaneDbError
from planedb.ingestion.loaders import RecordLoader, TypeLoader, RegistrationLoader
from planedb.models import TypeInfo, PlaneInfo

logger = logging.getLogger(__name__)

R = TypeVar('R')


class RecordIndex(Generic[R]):
    """
    Index of records loaded once from a single file.

    Duplicate ids keep the first record in file order; later ones are
    counted but unreachable.
    """

    def __init__(self, loader: RecordLoader[R]):
        self.loader = loader

        self._records: Dict[int, R] = {}
        self._order: List[R] = []
        self._loaded = False

        # Single-slot cache
        self._last_key: Optional[int] = None
        self._last_record: Optional[R] = None

        # Statistics
        self._hits = 0
        self._misses = 0
        self._duplicates = 0

    def load(self) -> int:
        """
        Populate the index from its file.

        May be called once. Records read before a failure stay owned
        by the index and are released by clear().

        Returns count of records indexed.
        """
        if self._loaded:
            raise PlaneDbError(f'{self.loader.path} is already loaded')
        self._loaded = True

        for record in self.loader.iter_records():
            self._order.append(record)
            if record.id in self._records:
                self._duplicates += 1
                continue
            self._records[record.id] = record

        if self._duplicates:
            logger.warning(f'{self._duplicates} duplicate ids in {self.loader.path}, keeping first')
        return len(self._records)

    def lookup(self, key: int) -> Optional[R]:
        """
        Find a record by id.

        Returns None on a miss, leaving the cached slot untouched.
        """
        if self._last_key is not None and key == self._last_key:
            self._hits += 1
            return self._last_record

        self._misses += 1
        record = self._records.get(key)
        if record is not None:
            self._last_key = key
            self._last_record = record
        return record

    def clear(self) -> None:
        """Release all records and the cached slot."""
        self._last_key = None
        self._last_record = None
        self._records.clear()
        self._order.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        """Iterate records in file order, duplicates included."""
        return iter(self._order)

    def __contains__(self, key: int) -> bool:
        return key in self._records

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def stats(self) -> dict:
        """Get index statistics."""
        return {
            'entries': len(self._records),
            'duplicates': self._duplicates,
            'skipped_lines': self.loader.skipped,
            'hits': self._hits,
            'misses': self._misses,
            'last_key': self._last_key,
        }


class TypeIndex(RecordIndex[TypeInfo]):
    """TypeInfo records keyed by model id."""

    def __init__(self, path: str):
        super().__init__(TypeLoader(path))


class RegistrationIndex(RecordIndex[PlaneInfo]):
    """PlaneInfo records keyed by numeric ICAO address."""

    def __init__(self, path: str):
        super().__init__(RegistrationLoader(path))
