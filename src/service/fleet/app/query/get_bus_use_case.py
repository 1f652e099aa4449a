from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_repo import IBusQueryRepo
from src.service.fleet.domain.entity.bus_entity import Bus


class GetBusUseCase:
    def __init__(self, *, bus_query_repo: IBusQueryRepo) -> None:
        self.bus_query_repo = bus_query_repo

    @classmethod
    @inject
    def depends(
        cls, bus_query_repo: IBusQueryRepo = Depends(Provide[Container.bus_query_repo])
    ) -> Self:
        return cls(bus_query_repo=bus_query_repo)

    @Logger.io
    async def get_by_id(self, *, bus_id: int) -> Bus:
        bus = await self.bus_query_repo.get_by_id(bus_id=bus_id)
        if not bus:
            raise NotFoundError('Bus not found')
        return bus


class ListBusesUseCase:
    def __init__(self, *, bus_query_repo: IBusQueryRepo) -> None:
        self.bus_query_repo = bus_query_repo

    @classmethod
    @inject
    def depends(
        cls, bus_query_repo: IBusQueryRepo = Depends(Provide[Container.bus_query_repo])
    ) -> Self:
        return cls(bus_query_repo=bus_query_repo)

    @Logger.io
    async def list_all(self) -> List[Bus]:
        return await self.bus_query_repo.list_all()
