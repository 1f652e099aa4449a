from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.dto.diagram_detail_dto import SeatDiagramDetail
from src.service.fleet.app.interface.i_bus_seat_repo import IBusSeatQueryRepo
from src.service.fleet.app.interface.i_seat_diagram_repo import ISeatDiagramQueryRepo
from src.service.fleet.app.interface.i_seat_diagram_zone_repo import ISeatDiagramZoneQueryRepo
from src.service.fleet.domain.entity.zone_entity import SeatDiagramZone


class GetSeatDiagramUseCase:
    """Read a bus's own seat diagram together with its zones and seats."""

    def __init__(
        self,
        *,
        seat_diagram_query_repo: ISeatDiagramQueryRepo,
        seat_diagram_zone_query_repo: ISeatDiagramZoneQueryRepo,
        bus_seat_query_repo: IBusSeatQueryRepo,
    ) -> None:
        self.seat_diagram_query_repo = seat_diagram_query_repo
        self.seat_diagram_zone_query_repo = seat_diagram_zone_query_repo
        self.bus_seat_query_repo = bus_seat_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_diagram_query_repo: ISeatDiagramQueryRepo = Depends(
            Provide[Container.seat_diagram_query_repo]
        ),
        seat_diagram_zone_query_repo: ISeatDiagramZoneQueryRepo = Depends(
            Provide[Container.seat_diagram_zone_query_repo]
        ),
        bus_seat_query_repo: IBusSeatQueryRepo = Depends(Provide[Container.bus_seat_query_repo]),
    ) -> Self:
        return cls(
            seat_diagram_query_repo=seat_diagram_query_repo,
            seat_diagram_zone_query_repo=seat_diagram_zone_query_repo,
            bus_seat_query_repo=bus_seat_query_repo,
        )

    async def _ensure_exists(self, seat_diagram_id: int) -> None:
        if not await self.seat_diagram_query_repo.get_by_id(seat_diagram_id=seat_diagram_id):
            raise NotFoundError('Seat diagram not found')

    @Logger.io
    async def get_by_id(self, *, seat_diagram_id: int) -> SeatDiagramDetail:
        seat_diagram = await self.seat_diagram_query_repo.get_by_id(seat_diagram_id=seat_diagram_id)
        if not seat_diagram:
            raise NotFoundError('Seat diagram not found')

        return SeatDiagramDetail(
            seat_diagram=seat_diagram,
            zones=await self.seat_diagram_zone_query_repo.list_by_seat_diagram_id(
                seat_diagram_id=seat_diagram_id
            ),
            seats=await self.bus_seat_query_repo.list_by_seat_diagram_id(
                seat_diagram_id=seat_diagram_id
            ),
        )

    @Logger.io
    async def list_zones(self, *, seat_diagram_id: int) -> List[SeatDiagramZone]:
        await self._ensure_exists(seat_diagram_id)
        return await self.seat_diagram_zone_query_repo.list_by_seat_diagram_id(
            seat_diagram_id=seat_diagram_id
        )
