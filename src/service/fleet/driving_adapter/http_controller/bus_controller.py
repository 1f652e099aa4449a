from typing import List

import attrs
from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.command.create_bus_use_case import CreateBusUseCase
from src.service.fleet.app.command.delete_bus_use_case import DeleteBusUseCase
from src.service.fleet.app.command.update_bus_use_case import UpdateBusUseCase
from src.service.fleet.app.query.get_bus_use_case import GetBusUseCase, ListBusesUseCase
from src.service.fleet.app.query.list_bus_valid_next_statuses_use_case import (
    ListBusValidNextStatusesUseCase,
)
from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.driving_adapter.schema.bus_schema import (
    BusCreateRequest,
    BusResponse,
    BusUpdateRequest,
    BusValidNextStatusesResponse,
)


router = APIRouter()


def _to_response(bus: Bus) -> BusResponse:
    return BusResponse.model_validate(attrs.asdict(bus))


@router.post('/create', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_bus(
    request: BusCreateRequest,
    use_case: CreateBusUseCase = Depends(CreateBusUseCase.depends),
) -> BusResponse:
    bus = await use_case.execute(bus=Bus(**request.model_dump()))
    return _to_response(bus)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_buses(
    use_case: ListBusesUseCase = Depends(ListBusesUseCase.depends),
) -> List[BusResponse]:
    return [_to_response(bus) for bus in await use_case.list_all()]


@router.get('/{bus_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_bus(
    bus_id: int,
    use_case: GetBusUseCase = Depends(GetBusUseCase.depends),
) -> BusResponse:
    return _to_response(await use_case.get_by_id(bus_id=bus_id))


@router.put('/{bus_id}/update', status_code=status.HTTP_200_OK)
@Logger.io
async def update_bus(
    bus_id: int,
    request: BusUpdateRequest,
    use_case: UpdateBusUseCase = Depends(UpdateBusUseCase.depends),
) -> BusResponse:
    # Only fields sent by the client; explicit nulls are not applied
    changes = {k: v for k, v in request.model_dump(exclude_unset=True).items() if v is not None}
    bus = await use_case.execute(bus_id=bus_id, changes=changes)
    return _to_response(bus)


@router.delete('/{bus_id}/delete', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_bus(
    bus_id: int,
    use_case: DeleteBusUseCase = Depends(DeleteBusUseCase.depends),
) -> None:
    await use_case.execute(bus_id=bus_id)


@router.get('/{bus_id}/valid-next-statuses', status_code=status.HTTP_200_OK)
@Logger.io
async def list_valid_next_statuses(
    bus_id: int,
    use_case: ListBusValidNextStatusesUseCase = Depends(ListBusValidNextStatusesUseCase.depends),
) -> BusValidNextStatusesResponse:
    return BusValidNextStatusesResponse(data=await use_case.execute(bus_id=bus_id))
