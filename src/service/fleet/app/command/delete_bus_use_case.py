from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger


class DeleteBusUseCase:
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
    async def execute(self, *, bus_id: int) -> None:
        """Delete the bus, then its seat diagram (zones explicitly, seats by cascade)."""
        async with self.uow_factory() as uow:
            bus = await uow.bus_command_repo.get_by_id(bus_id=bus_id, for_update=True)
            if not bus:
                raise NotFoundError('Bus not found')

            await uow.bus_command_repo.delete(bus_id=bus_id)
            if bus.seat_diagram_id is not None:
                await uow.seat_diagram_zone_command_repo.delete_by_seat_diagram_id(
                    seat_diagram_id=bus.seat_diagram_id
                )
                await uow.seat_diagram_command_repo.delete(seat_diagram_id=bus.seat_diagram_id)
            await uow.commit()

        Logger.base.info(
            f'🗑️ [BUS] Bus {bus_id} deleted with seat diagram {bus.seat_diagram_id}'
        )
