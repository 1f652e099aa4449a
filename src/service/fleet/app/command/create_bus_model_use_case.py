from typing import Callable, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_diagram_model_repo import IBusDiagramModelQueryRepo
from src.service.fleet.app.interface.i_bus_model_repo import IBusModelQueryRepo
from src.service.fleet.domain.entity.bus_model_entity import BusModel


class CreateBusModelUseCase:
    """
    Create a bus model pointing at its default diagram template.

    seating_capacity / num_floors default to the template's values; explicit values
    must agree with the template so every bus of the model gets the same capacity.
    """

    def __init__(
        self,
        *,
        bus_model_query_repo: IBusModelQueryRepo,
        bus_diagram_model_query_repo: IBusDiagramModelQueryRepo,
        uow_factory: Callable[[], AbstractUnitOfWork],
    ) -> None:
        self.bus_model_query_repo = bus_model_query_repo
        self.bus_diagram_model_query_repo = bus_diagram_model_query_repo
        self.uow_factory = uow_factory

    @classmethod
    @inject
    def depends(
        cls,
        bus_model_query_repo: IBusModelQueryRepo = Depends(
            Provide[Container.bus_model_query_repo]
        ),
        bus_diagram_model_query_repo: IBusDiagramModelQueryRepo = Depends(
            Provide[Container.bus_diagram_model_query_repo]
        ),
        uow_factory: Callable[[], AbstractUnitOfWork] = Depends(
            Provide[Container.unit_of_work.provider]
        ),
    ) -> Self:
        return cls(
            bus_model_query_repo=bus_model_query_repo,
            bus_diagram_model_query_repo=bus_diagram_model_query_repo,
            uow_factory=uow_factory,
        )

    @Logger.io
    async def execute(
        self,
        *,
        manufacturer: str,
        model: str,
        year: int,
        default_bus_diagram_model_id: int,
        seating_capacity: Optional[int] = None,
        num_floors: Optional[int] = None,
        engine_type: Optional[str] = None,
        distribution_type: Optional[str] = None,
        amenities: Optional[List[str]] = None,
        active: bool = True,
    ) -> BusModel:
        if await self.bus_model_query_repo.get_by_identity(
            manufacturer=manufacturer, model=model, year=year
        ):
            raise ConflictError(f'Bus model {manufacturer} {model} {year} already exists')

        diagram_model = await self.bus_diagram_model_query_repo.get_by_id(
            bus_diagram_model_id=default_bus_diagram_model_id
        )
        if not diagram_model:
            raise NotFoundError('Bus diagram model not found')

        if seating_capacity is not None and seating_capacity != diagram_model.total_seats:
            raise DomainError(
                f'Seating capacity {seating_capacity} does not match the diagram model '
                f'({diagram_model.total_seats} seats)'
            )
        if num_floors is not None and num_floors != diagram_model.num_floors:
            raise DomainError(
                f'Number of floors {num_floors} does not match the diagram model '
                f'({diagram_model.num_floors} floors)'
            )

        bus_model = BusModel(
            manufacturer=manufacturer,
            model=model,
            year=year,
            seating_capacity=diagram_model.total_seats,
            num_floors=diagram_model.num_floors,
            default_bus_diagram_model_id=default_bus_diagram_model_id,
            engine_type=engine_type,
            distribution_type=distribution_type,
            amenities=amenities or [],
            active=active,
        )

        async with self.uow_factory() as uow:
            created = await uow.bus_model_command_repo.create(bus_model=bus_model)
            await uow.commit()
        return created
