from typing import List

import attrs
from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.command.create_bus_model_use_case import CreateBusModelUseCase
from src.service.fleet.app.query.get_bus_model_use_case import GetBusModelUseCase
from src.service.fleet.driving_adapter.schema.bus_model_schema import (
    BusModelCreateRequest,
    BusModelResponse,
)


router = APIRouter()


@router.post('/create', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_bus_model(
    request: BusModelCreateRequest,
    use_case: CreateBusModelUseCase = Depends(CreateBusModelUseCase.depends),
) -> BusModelResponse:
    bus_model = await use_case.execute(**request.model_dump())
    return BusModelResponse.model_validate(attrs.asdict(bus_model))


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_bus_models(
    use_case: GetBusModelUseCase = Depends(GetBusModelUseCase.depends),
) -> List[BusModelResponse]:
    return [
        BusModelResponse.model_validate(attrs.asdict(bus_model))
        for bus_model in await use_case.list_all()
    ]


@router.get('/{bus_model_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_bus_model(
    bus_model_id: int,
    use_case: GetBusModelUseCase = Depends(GetBusModelUseCase.depends),
) -> BusModelResponse:
    bus_model = await use_case.get_by_id(bus_model_id=bus_model_id)
    return BusModelResponse.model_validate(attrs.asdict(bus_model))
