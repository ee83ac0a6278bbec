"""
PlaneInfo model - registration records keyed by ICAO address.

One record per line of the FAA MASTER.txt file.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaneInfo:
    """
    Registration record.

    Fields:
        id: ICAO24 transponder address as an integer (e.g., 0xA1B2C3)
        n_number: N-number as stored by the FAA, without the leading 'N'
        model_id: TypeInfo id; may not resolve to any type
        registrant: registered owner name
    """
    id: int
    n_number: str = ''
    model_id: int = 0
    registrant: str = ''

    def __repr__(self) -> str:
        return f'<PlaneInfo {self.icao} {self.tail_number or "?"}>'

    @property
    def icao(self) -> str:
        """Lowercase 6-character hex address (e.g., 'a1b2c3')."""
        return f'{self.id:06x}'

    @property
    def tail_number(self) -> str:
        """N-number with the 'N' prefix MASTER.txt omits (e.g., 'N12345')."""
        if not self.n_number:
            return ''
        if self.n_number.upper().startswith('N'):
            return self.n_number
        return f'N{self.n_number}'

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'icao24': self.icao,
            'n_number': self.n_number,
            'tail_number': self.tail_number,
            'model_id': self.model_id,
            'registrant': self.registrant,
        }
