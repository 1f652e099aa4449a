from datetime import date, datetime
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.fleet.domain.bus_status_domain import bus_status_machine
from src.service.fleet.domain.enum.bus_status import BusStatus
from src.service.fleet.domain.enum.license_plate_type import LicensePlateType


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise DomainError(f'Bus {attribute.name} cannot be empty')


def _validate_non_negative(
    instance: object, attribute: attrs.Attribute, value: Optional[float]
) -> None:
    if value is not None and value < 0:
        raise DomainError(f'Bus {attribute.name} cannot be negative')


# Fields a client may never set directly; the seat diagram is always provisioned
PROTECTED_FIELDS = frozenset({'id', 'seat_diagram_id', 'created_at', 'updated_at'})


@attrs.define
class Bus:
    economic_number: str = attrs.field(validator=_validate_non_empty_string)
    registration_number: str = attrs.field(validator=_validate_non_empty_string)
    license_plate_type: LicensePlateType = attrs.field(converter=LicensePlateType)
    license_plate_number: str = attrs.field(validator=_validate_non_empty_string)
    model_id: int
    serial_number: str = attrs.field(validator=_validate_non_empty_string)
    chassis_number: str = attrs.field(validator=_validate_non_empty_string)
    purchase_date: date
    expiration_date: date
    gross_vehicle_weight: float = attrs.field(validator=_validate_non_negative)
    status: BusStatus = attrs.field(default=BusStatus.ACTIVE, converter=BusStatus)
    available_for_tourism_only: bool = False
    circulation_card: Optional[str] = None
    erp_client_number: Optional[str] = None
    vehicle_id: Optional[str] = None
    engine_number: Optional[str] = None
    sct_permit: Optional[str] = None
    current_kilometer: Optional[float] = attrs.field(default=None, validator=_validate_non_negative)
    gps_id: Optional[str] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    active: bool = True
    seat_diagram_id: Optional[int] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_model_change(self, changes: dict[str, Any]) -> bool:
        new_model_id = changes.get('model_id')
        return new_model_id is not None and new_model_id != self.model_id

    def validate_status_change(self, changes: dict[str, Any]) -> None:
        """Reject the whole update when it carries an illegal status change."""
        new_status = changes.get('status')
        if new_status is not None:
            bus_status_machine.validate_transition(self.status, BusStatus(new_status))

    def apply_changes(self, changes: dict[str, Any]) -> 'Bus':
        if protected := PROTECTED_FIELDS & changes.keys():
            raise DomainError(f'Fields cannot be updated directly: {", ".join(sorted(protected))}')
        self.validate_status_change(changes)
        return attrs.evolve(self, **changes)

    def assign_seat_diagram(self, seat_diagram_id: int) -> 'Bus':
        return attrs.evolve(self, seat_diagram_id=seat_diagram_id)
