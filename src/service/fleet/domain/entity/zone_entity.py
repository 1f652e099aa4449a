from datetime import datetime
from typing import Any, List, Optional

import attrs

from src.platform.exception.exceptions import DomainError


def _validate_zone_name(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError('Zone name cannot be empty')


def _validate_row_numbers(instance: object, attribute: attrs.Attribute, value: List[int]) -> None:
    if not value:
        raise DomainError('Zone must cover at least one row')
    if any(row < 1 for row in value):
        raise DomainError('Zone row numbers must be positive')
    if len(set(value)) != len(value):
        raise DomainError('Zone row numbers must be unique')


def _validate_price_multiplier(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value <= 0:
        raise DomainError('Zone price multiplier must be greater than 0')


@attrs.define
class BusDiagramModelZone:
    """Pricing zone defined on a diagram template"""

    bus_diagram_model_id: int
    name: str = attrs.field(validator=_validate_zone_name)
    row_numbers: List[int] = attrs.field(validator=_validate_row_numbers)
    price_multiplier: float = attrs.field(default=1.0, validator=_validate_price_multiplier)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class SeatDiagramZone:
    """Pricing zone owned by one bus's seat diagram"""

    seat_diagram_id: int
    name: str = attrs.field(validator=_validate_zone_name)
    row_numbers: List[int] = attrs.field(validator=_validate_row_numbers)
    price_multiplier: float = attrs.field(default=1.0, validator=_validate_price_multiplier)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def clone_from(cls, zone: BusDiagramModelZone, *, seat_diagram_id: int) -> 'SeatDiagramZone':
        return cls(
            seat_diagram_id=seat_diagram_id,
            name=zone.name,
            row_numbers=list(zone.row_numbers),
            price_multiplier=zone.price_multiplier,
        )

    def apply_changes(self, **changes: Any) -> 'SeatDiagramZone':
        """Return a copy with the given fields replaced; validators run on the copy."""
        changes = {key: value for key, value in changes.items() if value is not None}
        if 'row_numbers' in changes:
            changes['row_numbers'] = list(changes['row_numbers'])
        return attrs.evolve(self, **changes)
