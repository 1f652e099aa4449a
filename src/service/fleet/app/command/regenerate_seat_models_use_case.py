from typing import Callable, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.seat_entity import BusSeatModel
from src.service.fleet.domain.seat_layout_domain import generate_seat_models


class RegenerateSeatModelsUseCase:
    """Rebuild a template's seat models from its stored floor grid.

    Seat diagrams already cloned from the template are untouched.
    """

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
    async def execute(self, *, bus_diagram_model_id: int) -> List[BusSeatModel]:
        async with self.uow_factory() as uow:
            diagram_model = await uow.bus_diagram_model_command_repo.get_by_id(
                bus_diagram_model_id=bus_diagram_model_id
            )
            if not diagram_model:
                raise NotFoundError('Bus diagram model not found')

            seat_models = generate_seat_models(
                bus_diagram_model_id=bus_diagram_model_id,
                num_floors=diagram_model.num_floors,
                seats_per_floor=diagram_model.seats_per_floor,
            )
            removed = await uow.bus_seat_model_command_repo.delete_by_bus_diagram_model_id(
                bus_diagram_model_id=bus_diagram_model_id
            )
            created = await uow.bus_seat_model_command_repo.create_many(seat_models=seat_models)
            await uow.commit()

        Logger.base.info(
            f'♻️ [TEMPLATE] Diagram model {bus_diagram_model_id}: '
            f'{removed} seat models replaced by {len(created)}'
        )
        return created
