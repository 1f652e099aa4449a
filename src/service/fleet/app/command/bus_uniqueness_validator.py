from typing import Optional

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_repo import IBusQueryRepo


@Logger.io
async def validate_bus_uniqueness(
    bus_query_repo: IBusQueryRepo,
    *,
    registration_number: Optional[str] = None,
    license_plate_number: Optional[str] = None,
    current_bus_id: Optional[int] = None,
) -> None:
    """Reject identifiers already used by another bus (the bus itself is ignored on update)."""
    if registration_number:
        existing = await bus_query_repo.get_by_registration_number(
            registration_number=registration_number
        )
        if existing and existing.id != current_bus_id:
            raise ConflictError(
                f'A bus with registration number {registration_number} already exists'
            )

    if license_plate_number:
        existing = await bus_query_repo.get_by_license_plate_number(
            license_plate_number=license_plate_number
        )
        if existing and existing.id != current_bus_id:
            raise ConflictError(
                f'A bus with license plate number {license_plate_number} already exists'
            )
