from typing import List

import attrs
from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.command.update_seat_diagram_zone_use_case import (
    UpdateSeatDiagramZoneUseCase,
)
from src.service.fleet.app.query.get_seat_diagram_use_case import GetSeatDiagramUseCase
from src.service.fleet.driving_adapter.schema.diagram_schema import (
    SeatDiagramResponse,
    ZoneResponse,
    ZoneUpdateRequest,
)


router = APIRouter()


@router.get('/{seat_diagram_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_seat_diagram(
    seat_diagram_id: int,
    use_case: GetSeatDiagramUseCase = Depends(GetSeatDiagramUseCase.depends),
) -> SeatDiagramResponse:
    detail = await use_case.get_by_id(seat_diagram_id=seat_diagram_id)
    return SeatDiagramResponse.model_validate(
        {
            **attrs.asdict(detail.seat_diagram),
            'zones': [attrs.asdict(zone) for zone in detail.zones],
            'seats': [attrs.asdict(seat) for seat in detail.seats],
        }
    )


@router.get('/{seat_diagram_id}/zones', status_code=status.HTTP_200_OK)
@Logger.io
async def list_seat_diagram_zones(
    seat_diagram_id: int,
    use_case: GetSeatDiagramUseCase = Depends(GetSeatDiagramUseCase.depends),
) -> List[ZoneResponse]:
    zones = await use_case.list_zones(seat_diagram_id=seat_diagram_id)
    return [ZoneResponse.model_validate(attrs.asdict(zone)) for zone in zones]


@router.put('/{seat_diagram_id}/zones/{zone_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_seat_diagram_zone(
    seat_diagram_id: int,
    zone_id: int,
    request: ZoneUpdateRequest,
    use_case: UpdateSeatDiagramZoneUseCase = Depends(UpdateSeatDiagramZoneUseCase.depends),
) -> ZoneResponse:
    zone = await use_case.execute(
        seat_diagram_id=seat_diagram_id, zone_id=zone_id, **request.model_dump(exclude_unset=True)
    )
    return ZoneResponse.model_validate(attrs.asdict(zone))
