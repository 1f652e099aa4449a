from typing import Callable, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.zone_entity import SeatDiagramZone


class UpdateSeatDiagramZoneUseCase:
    """Edit one zone of a bus's own seat diagram; the template it was cloned from is untouched."""

    def __init__(self, *, uow_factory: Callable[[], AbstractUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    @classmethod
    @inject
    def depends(
        cls,
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
    ) -> Self:
        return cls(uow_factory=uow_factory)

    @Logger.io
    async def execute(
        self,
        *,
        seat_diagram_id: int,
        zone_id: int,
        name: Optional[str] = None,
        row_numbers: Optional[List[int]] = None,
        price_multiplier: Optional[float] = None,
    ) -> SeatDiagramZone:
        async with self.uow_factory() as uow:
            zone = await uow.seat_diagram_zone_command_repo.get_by_id(zone_id=zone_id)
            if not zone or zone.seat_diagram_id != seat_diagram_id:
                raise NotFoundError('Seat diagram zone not found')

            updated = await uow.seat_diagram_zone_command_repo.update(
                zone=zone.apply_changes(
                    name=name, row_numbers=row_numbers, price_multiplier=price_multiplier
                )
            )
            await uow.commit()
        return updated
