"""
TypeInfo model - aircraft reference data keyed by model id.

One record per line of the FAA ACFTREF.txt file. The id packs the
manufacturer, model and series codes into a single integer, which
registration records use as a foreign key.
"""

from dataclasses import dataclass
from typing import Tuple


# Aircraft category descriptions, indexed by the ACFTREF type digit
CATEGORY_TABLE: Tuple[str, ...] = (
    'None',
    'Glider',
    'Balloon',
    'Blimp/Dirigible',
    'Fixed wing single engine',
    'Fixed wing multi engine',
    'Rotorcraft',
    'Weight-shift-control',
    'Powered Parachute',
    'Gyroplane',
)

UNKNOWN_CATEGORY = 'Unknown'


def describe_category(category: int) -> str:
    """Description for a type digit, 'Unknown' outside the table."""
    if 0 <= category < len(CATEGORY_TABLE):
        return CATEGORY_TABLE[category]
    return UNKNOWN_CATEGORY


@dataclass(frozen=True)
class TypeInfo:
    """
    Aircraft type reference record.

    Fields:
        id: manufacturer/model/series code (e.g., 1200119)
        manufacturer: manufacturer name (e.g., 'CESSNA')
        model: model name (e.g., '172')
        category: type digit, index into CATEGORY_TABLE
        seats: maximum number of seats
    """
    id: int
    manufacturer: str = ''
    model: str = ''
    category: int = 0
    seats: int = 0

    def __repr__(self) -> str:
        return f'<TypeInfo {self.id} {self.manufacturer or "?"} {self.model or "?"}>'

    @property
    def category_description(self) -> str:
        return describe_category(self.category)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'id': self.id,
            'manufacturer': self.manufacturer,
            'model': self.model,
            'category': self.category,
            'category_description': self.category_description,
            'seats': self.seats,
        }
