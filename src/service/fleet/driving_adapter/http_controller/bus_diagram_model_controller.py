from typing import List

import attrs
from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.command.create_bus_diagram_model_use_case import (
    CreateBusDiagramModelUseCase,
)
from src.service.fleet.app.command.create_bus_diagram_model_zone_use_case import (
    CreateBusDiagramModelZoneUseCase,
)
from src.service.fleet.app.command.regenerate_seat_models_use_case import (
    RegenerateSeatModelsUseCase,
)
from src.service.fleet.app.query.get_bus_diagram_model_use_case import GetBusDiagramModelUseCase
from src.service.fleet.domain.entity.diagram_entity import FloorSeats
from src.service.fleet.driving_adapter.schema.diagram_schema import (
    BusDiagramModelCreateRequest,
    BusDiagramModelDetailResponse,
    BusDiagramModelResponse,
    SeatResponse,
    ZoneCreateRequest,
    ZoneResponse,
)


router = APIRouter()


@router.post('/create', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_bus_diagram_model(
    request: BusDiagramModelCreateRequest,
    use_case: CreateBusDiagramModelUseCase = Depends(CreateBusDiagramModelUseCase.depends),
) -> BusDiagramModelResponse:
    diagram_model = await use_case.execute(
        name=request.name,
        description=request.description,
        max_capacity=request.max_capacity,
        num_floors=request.num_floors,
        seats_per_floor=[FloorSeats(**floor.model_dump()) for floor in request.seats_per_floor],
        total_seats=request.total_seats,
        is_factory_default=request.is_factory_default,
        active=request.active,
    )
    return BusDiagramModelResponse.model_validate(attrs.asdict(diagram_model))


@router.get('/{bus_diagram_model_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_bus_diagram_model(
    bus_diagram_model_id: int,
    use_case: GetBusDiagramModelUseCase = Depends(GetBusDiagramModelUseCase.depends),
) -> BusDiagramModelDetailResponse:
    detail = await use_case.get_by_id(bus_diagram_model_id=bus_diagram_model_id)
    return BusDiagramModelDetailResponse.model_validate(
        {
            **attrs.asdict(detail.diagram_model),
            'zones': [attrs.asdict(zone) for zone in detail.zones],
            'seat_models': [attrs.asdict(seat) for seat in detail.seat_models],
        }
    )


@router.post('/{bus_diagram_model_id}/zones', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_bus_diagram_model_zone(
    bus_diagram_model_id: int,
    request: ZoneCreateRequest,
    use_case: CreateBusDiagramModelZoneUseCase = Depends(CreateBusDiagramModelZoneUseCase.depends),
) -> ZoneResponse:
    zone = await use_case.execute(
        bus_diagram_model_id=bus_diagram_model_id,
        name=request.name,
        row_numbers=request.row_numbers,
        price_multiplier=request.price_multiplier,
    )
    return ZoneResponse.model_validate(attrs.asdict(zone))


@router.post('/{bus_diagram_model_id}/seats/regenerate', status_code=status.HTTP_200_OK)
@Logger.io
async def regenerate_seat_models(
    bus_diagram_model_id: int,
    use_case: RegenerateSeatModelsUseCase = Depends(RegenerateSeatModelsUseCase.depends),
) -> List[SeatResponse]:
    seat_models = await use_case.execute(bus_diagram_model_id=bus_diagram_model_id)
    return [SeatResponse.model_validate(attrs.asdict(seat)) for seat in seat_models]
