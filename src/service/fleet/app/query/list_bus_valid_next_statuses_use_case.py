from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_repo import IBusQueryRepo
from src.service.fleet.domain.bus_status_domain import bus_status_machine
from src.service.fleet.domain.enum.bus_status import BusStatus


class ListBusValidNextStatusesUseCase:
    """Statuses a bus may move to from its current one, in transition table order."""

    def __init__(self, *, bus_query_repo: IBusQueryRepo) -> None:
        self.bus_query_repo = bus_query_repo

    @classmethod
    @inject
    def depends(
        cls, bus_query_repo: IBusQueryRepo = Depends(Provide[Container.bus_query_repo])
    ) -> Self:
        return cls(bus_query_repo=bus_query_repo)

    @Logger.io
    async def execute(self, *, bus_id: int) -> List[BusStatus]:
        bus = await self.bus_query_repo.get_by_id(bus_id=bus_id)
        if not bus:
            raise NotFoundError('Bus not found')
        return bus_status_machine.get_possible_next_states(bus.status)
