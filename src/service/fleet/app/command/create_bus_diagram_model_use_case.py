from typing import Callable, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, FloorSeats
from src.service.fleet.domain.seat_layout_domain import (
    calculate_total_seats,
    generate_seat_models,
    validate_seats_per_floor,
)


class CreateBusDiagramModelUseCase:
    """
    Create a diagram template and generate its seat models from the floor grid.

    The template row and its seat models are written in one transaction.
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
    async def execute(
        self,
        *,
        name: str,
        max_capacity: int,
        num_floors: int,
        seats_per_floor: List[FloorSeats],
        total_seats: Optional[int] = None,
        description: Optional[str] = None,
        is_factory_default: bool = True,
        active: bool = True,
    ) -> BusDiagramModel:
        validate_seats_per_floor(num_floors=num_floors, seats_per_floor=seats_per_floor)

        calculated_total = calculate_total_seats(seats_per_floor)
        if total_seats is not None and total_seats != calculated_total:
            raise DomainError(
                f'Total seats {total_seats} does not match the floor configuration '
                f'({calculated_total} seats)'
            )
        if calculated_total > max_capacity:
            raise DomainError(
                f'Max capacity {max_capacity} is lower than the number of seats '
                f'({calculated_total})'
            )

        diagram_model = BusDiagramModel(
            name=name,
            description=description,
            max_capacity=max_capacity,
            num_floors=num_floors,
            seats_per_floor=sorted(seats_per_floor, key=lambda floor: floor.floor_number),
            total_seats=calculated_total,
            is_factory_default=is_factory_default,
            active=active,
        )

        async with self.uow_factory() as uow:
            created = await uow.bus_diagram_model_command_repo.create(
                bus_diagram_model=diagram_model
            )
            assert created.id is not None
            await uow.bus_seat_model_command_repo.create_many(
                seat_models=generate_seat_models(
                    bus_diagram_model_id=created.id,
                    num_floors=created.num_floors,
                    seats_per_floor=created.seats_per_floor,
                )
            )
            await uow.commit()

        Logger.base.info(
            f'🧩 [TEMPLATE] Diagram model {created.id} "{created.name}" created '
            f'with {created.total_seats} seats'
        )
        return created
