from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.dto.diagram_detail_dto import BusDiagramModelDetail
from src.service.fleet.app.interface.i_bus_diagram_model_repo import IBusDiagramModelQueryRepo
from src.service.fleet.app.interface.i_bus_diagram_model_zone_repo import (
    IBusDiagramModelZoneQueryRepo,
)
from src.service.fleet.app.interface.i_bus_seat_model_repo import IBusSeatModelQueryRepo


class GetBusDiagramModelUseCase:
    def __init__(
        self,
        *,
        bus_diagram_model_query_repo: IBusDiagramModelQueryRepo,
        bus_diagram_model_zone_query_repo: IBusDiagramModelZoneQueryRepo,
        bus_seat_model_query_repo: IBusSeatModelQueryRepo,
    ) -> None:
        self.bus_diagram_model_query_repo = bus_diagram_model_query_repo
        self.bus_diagram_model_zone_query_repo = bus_diagram_model_zone_query_repo
        self.bus_seat_model_query_repo = bus_seat_model_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        bus_diagram_model_query_repo: IBusDiagramModelQueryRepo = Depends(
            Provide[Container.bus_diagram_model_query_repo]
        ),
        bus_diagram_model_zone_query_repo: IBusDiagramModelZoneQueryRepo = Depends(
            Provide[Container.bus_diagram_model_zone_query_repo]
        ),
        bus_seat_model_query_repo: IBusSeatModelQueryRepo = Depends(
            Provide[Container.bus_seat_model_query_repo]
        ),
    ) -> Self:
        return cls(
            bus_diagram_model_query_repo=bus_diagram_model_query_repo,
            bus_diagram_model_zone_query_repo=bus_diagram_model_zone_query_repo,
            bus_seat_model_query_repo=bus_seat_model_query_repo,
        )

    @Logger.io
    async def get_by_id(self, *, bus_diagram_model_id: int) -> BusDiagramModelDetail:
        diagram_model = await self.bus_diagram_model_query_repo.get_by_id(
            bus_diagram_model_id=bus_diagram_model_id
        )
        if not diagram_model:
            raise NotFoundError('Bus diagram model not found')

        return BusDiagramModelDetail(
            diagram_model=diagram_model,
            zones=await self.bus_diagram_model_zone_query_repo.list_by_bus_diagram_model_id(
                bus_diagram_model_id=bus_diagram_model_id
            ),
            seat_models=await self.bus_seat_model_query_repo.list_by_bus_diagram_model_id(
                bus_diagram_model_id=bus_diagram_model_id
            ),
        )
