from typing import Callable, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone


class CreateBusDiagramModelZoneUseCase:
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
        bus_diagram_model_id: int,
        name: str,
        row_numbers: List[int],
        price_multiplier: float = 1.0,
    ) -> BusDiagramModelZone:
        zone = BusDiagramModelZone(
            bus_diagram_model_id=bus_diagram_model_id,
            name=name,
            row_numbers=row_numbers,
            price_multiplier=price_multiplier,
        )
        async with self.uow_factory() as uow:
            if not await uow.bus_diagram_model_command_repo.get_by_id(
                bus_diagram_model_id=bus_diagram_model_id
            ):
                raise NotFoundError('Bus diagram model not found')
            created = await uow.bus_diagram_model_zone_command_repo.create(zone=zone)
            await uow.commit()
        return created
