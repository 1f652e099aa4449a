from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs

from src.platform.exception.exceptions import DomainError


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Diagram {attribute.name} cannot be empty')


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise DomainError(f'Diagram {attribute.name} must be greater than 0')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise DomainError(f'Diagram {attribute.name} cannot be negative')


@attrs.define(frozen=True)
class FloorSeats:
    """Seat grid of one floor: rows of `seats_left` + aisle + `seats_right`"""

    floor_number: int = attrs.field(validator=_validate_positive)
    num_rows: int = attrs.field(validator=_validate_positive)
    seats_left: int = attrs.field(validator=_validate_non_negative)
    seats_right: int = attrs.field(validator=_validate_non_negative)

    @property
    def seats_per_row(self) -> int:
        return self.seats_left + self.seats_right

    @property
    def total_seats(self) -> int:
        return self.num_rows * self.seats_per_row

    def to_dict(self) -> Dict[str, int]:
        return attrs.asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FloorSeats':
        return cls(
            floor_number=int(data['floor_number']),
            num_rows=int(data['num_rows']),
            seats_left=int(data['seats_left']),
            seats_right=int(data['seats_right']),
        )


@attrs.define
class BusDiagramModel:
    """Reusable seating layout template"""

    name: str = attrs.field(validator=_validate_non_empty_string)
    max_capacity: int = attrs.field(validator=_validate_positive)
    num_floors: int = attrs.field(validator=_validate_positive)
    seats_per_floor: List[FloorSeats]
    total_seats: int = attrs.field(validator=_validate_non_negative)
    description: Optional[str] = None
    is_factory_default: bool = True
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class SeatDiagram:
    """A bus's own copy of a diagram template"""

    bus_diagram_model_id: int
    name: str = attrs.field(validator=_validate_non_empty_string)
    max_capacity: int = attrs.field(validator=_validate_positive)
    num_floors: int = attrs.field(validator=_validate_positive)
    seats_per_floor: List[FloorSeats]
    total_seats: int = attrs.field(validator=_validate_non_negative)
    is_factory_default: bool = False
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_template(
        cls, *, template: BusDiagramModel, manufacturer: str, model: str, registration_number: str
    ) -> 'SeatDiagram':
        if template.id is None:
            raise ValueError('Template must be persisted before it can be cloned')
        return cls(
            bus_diagram_model_id=template.id,
            name=f'{manufacturer} {model} - {registration_number}',
            max_capacity=template.max_capacity,
            num_floors=template.num_floors,
            seats_per_floor=list(template.seats_per_floor),
            total_seats=template.total_seats,
            is_factory_default=False,
            active=True,
        )
