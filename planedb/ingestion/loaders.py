"""
Record loaders for the FAA flat files.

Each loader makes a single pass over its file, skips lines narrower
than the layout's minimum width, and decodes the rest into records in
file order.

Usage:
    from planedb.ingestion.loaders import TypeLoader

    loader = TypeLoader('ACFTREF.txt')
    for record in loader.iter_records():
        print(record.manufacturer, record.model)
"""

import logging
from typing import Callable, Generic, Iterator, TypeVar

from planedb.exceptions import DataFileError, RecordBuildError
from planedb.ingestion.layouts import RecordLayout, TYPE_LAYOUT, REGISTRATION_LAYOUT
from planedb.models import TypeInfo, PlaneInfo

logger = logging.getLogger(__name__)

# Read buffer size; a longer line continues as the next read
MAX_LINE_LENGTH = 1023

R = TypeVar('R')


class RecordLoader(Generic[R]):
    """
    Single-pass fixed-width file reader.

    Width is measured on the raw line including its line terminator.
    Files are decoded as Latin-1 so character offsets equal byte offsets.
    """

    def __init__(self, path: str, layout: RecordLayout, record_factory: Callable[..., R]):
        self.path = str(path)
        self.layout = layout
        self.record_factory = record_factory

        # Statistics for the last pass
        self.loaded = 0
        self.skipped = 0

    def iter_records(self) -> Iterator[R]:
        """
        Yield one record per accepted line.

        Raises DataFileError if the file cannot be opened or read, and
        RecordBuildError if a record cannot be constructed.
        """
        try:
            f = open(self.path, 'r', encoding='latin-1', newline='')
        except OSError as e:
            logger.error(f"cannot open file '{self.path}': {e}")
            raise DataFileError(self.path, e.strerror) from e

        logger.info(f'Loading {self.layout.name} records from {self.path}')
        self.loaded = 0
        self.skipped = 0

        line_number = 0
        try:
            with f:
                for line in iter(lambda: f.readline(MAX_LINE_LENGTH), ''):
                    line_number += 1
                    if len(line) < self.layout.min_width:
                        self.skipped += 1
                        continue
                    yield self._build(line, line_number)
                    self.loaded += 1
        except OSError as e:
            logger.error(f"cannot read file '{self.path}' after line {line_number}: {e}")
            raise DataFileError(self.path, e.strerror) from e

        if self.skipped:
            logger.debug(f'Skipped {self.skipped} short lines in {self.path}')
        logger.info(f'Loaded {self.loaded} {self.layout.name} records')

    def _build(self, line: str, line_number: int) -> R:
        fields = self.layout.decode(line)
        try:
            return self.record_factory(**fields)
        except (TypeError, ValueError, MemoryError) as e:
            logger.error(f'cannot build record at {self.path}:{line_number}: {e}')
            raise RecordBuildError(self.path, line_number, str(e)) from e


class TypeLoader(RecordLoader[TypeInfo]):
    """Loader for the ACFTREF.txt aircraft reference file."""

    def __init__(self, path: str):
        super().__init__(path, TYPE_LAYOUT, TypeInfo)


class RegistrationLoader(RecordLoader[PlaneInfo]):
    """Loader for the MASTER.txt registration file."""

    def __init__(self, path: str):
        super().__init__(path, REGISTRATION_LAYOUT, PlaneInfo)
