from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_model_repo import IBusModelQueryRepo
from src.service.fleet.domain.entity.bus_model_entity import BusModel


class GetBusModelUseCase:
    def __init__(self, *, bus_model_query_repo: IBusModelQueryRepo) -> None:
        self.bus_model_query_repo = bus_model_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        bus_model_query_repo: IBusModelQueryRepo = Depends(
            Provide[Container.bus_model_query_repo]
        ),
    ) -> Self:
        return cls(bus_model_query_repo=bus_model_query_repo)

    @Logger.io
    async def get_by_id(self, *, bus_model_id: int) -> BusModel:
        bus_model = await self.bus_model_query_repo.get_by_id(bus_model_id=bus_model_id)
        if not bus_model:
            raise NotFoundError('Bus model not found')
        return bus_model

    @Logger.io
    async def list_all(self) -> List[BusModel]:
        return await self.bus_model_query_repo.list_all()
