"""
Fixed-width layouts of the FAA releasable aircraft files.

Column positions are a file-format contract, kept here as data so a
revision of the FAA files only means editing these tables.

    ACFTREF.txt  aircraft reference (manufacturer/model/series)
    MASTER.txt   aircraft registration master
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from planedb.ingestion.fields import parse_hex, parse_int, pickup


@dataclass(frozen=True)
class FieldSpec:
    """
    One column of a fixed-width record.

    Fields:
        name: attribute name on the record
        kind: 'int' (decimal), 'hex', or 'text'
        start: byte offset of the first character
        end: exclusive end offset, only used by 'text' fields
    """
    name: str
    kind: str
    start: int
    end: Optional[int] = None

    def decode(self, line: str) -> Any:
        if self.kind == 'text':
            return pickup(line, self.start, self.end)
        return _NUMERIC_DECODERS[self.kind](line, self.start)


_NUMERIC_DECODERS: Dict[str, Callable[[str, int], int]] = {
    'int': parse_int,
    'hex': parse_hex,
}


@dataclass(frozen=True)
class RecordLayout:
    """Field table plus the minimum line width a record needs."""
    name: str
    min_width: int
    fields: Tuple[FieldSpec, ...]

    def decode(self, line: str) -> Dict[str, Any]:
        return decode_line(line, self)


def decode_line(line: str, layout: RecordLayout) -> Dict[str, Any]:
    """Extract every field of layout from line, keyed by field name."""
    return {spec.name: spec.decode(line) for spec in layout.fields}


TYPE_LAYOUT = RecordLayout(
    name='ACFTREF',
    min_width=68,
    fields=(
        FieldSpec('id', 'int', 0),
        FieldSpec('manufacturer', 'text', 8, 38),
        FieldSpec('model', 'text', 39, 59),
        FieldSpec('category', 'int', 60),
        FieldSpec('seats', 'int', 72),
    ),
)

REGISTRATION_LAYOUT = RecordLayout(
    name='MASTER',
    min_width=610,
    fields=(
        FieldSpec('n_number', 'text', 0, 5),
        FieldSpec('model_id', 'int', 37),
        FieldSpec('registrant', 'text', 58, 107),
        FieldSpec('id', 'hex', 601),
    ),
)
