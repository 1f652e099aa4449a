from datetime import datetime
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import DomainError


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Bus model {attribute.name} cannot be empty')


def _validate_year(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not 1900 <= value <= 2100:
        raise DomainError('Bus model year must be between 1900 and 2100')


@attrs.define
class BusModel:
    manufacturer: str = attrs.field(validator=_validate_non_empty_string)
    model: str = attrs.field(validator=_validate_non_empty_string)
    year: int = attrs.field(validator=_validate_year)
    seating_capacity: int
    num_floors: int
    default_bus_diagram_model_id: int
    engine_type: Optional[str] = None
    distribution_type: Optional[str] = None
    amenities: List[str] = attrs.field(factory=list)
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
