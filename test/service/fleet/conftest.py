"""
Fleet fixtures: templates, bus models and use cases built from the DI container
"""

from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from sqlalchemy import func, select

from src.platform.config.di import container
from src.platform.database.db_setting import Base, Database
from src.service.fleet.app.command.create_bus_diagram_model_use_case import (
    CreateBusDiagramModelUseCase,
)
from src.service.fleet.app.command.create_bus_diagram_model_zone_use_case import (
    CreateBusDiagramModelZoneUseCase,
)
from src.service.fleet.app.command.create_bus_model_use_case import CreateBusModelUseCase
from src.service.fleet.app.command.create_bus_use_case import CreateBusUseCase
from src.service.fleet.app.command.delete_bus_use_case import DeleteBusUseCase
from src.service.fleet.app.command.update_bus_use_case import UpdateBusUseCase
from src.service.fleet.domain.entity.bus_model_entity import BusModel
from src.service.fleet.domain.entity.diagram_entity import FloorSeats


@pytest.fixture
def create_bus_model(database: Database) -> Callable[..., Awaitable[BusModel]]:
    """
    Create a template (with zones) and a bus model pointing at it.

    floors: list of (num_rows, seats_left, seats_right), one entry per floor
    zones: list of (name, row_numbers, price_multiplier)
    """
    uow_factory = container.unit_of_work

    async def _create(
        *,
        manufacturer: str,
        model: str,
        floors: list[tuple[int, int, int]],
        zones: list[tuple[str, list[int], float]] | None = None,
        year: int = 2024,
    ) -> BusModel:
        seats_per_floor = [
            FloorSeats(floor_number=n, num_rows=rows, seats_left=left, seats_right=right)
            for n, (rows, left, right) in enumerate(floors, start=1)
        ]
        total = sum(floor.total_seats for floor in seats_per_floor)
        template = await CreateBusDiagramModelUseCase(uow_factory=uow_factory).execute(
            name=f'{manufacturer} {model} layout',
            max_capacity=total,
            num_floors=len(seats_per_floor),
            seats_per_floor=seats_per_floor,
        )
        assert template.id is not None
        for name, rows, multiplier in zones or []:
            await CreateBusDiagramModelZoneUseCase(uow_factory=uow_factory).execute(
                bus_diagram_model_id=template.id,
                name=name,
                row_numbers=rows,
                price_multiplier=multiplier,
            )
        return await CreateBusModelUseCase(
            bus_model_query_repo=container.bus_model_query_repo(),
            bus_diagram_model_query_repo=container.bus_diagram_model_query_repo(),
            uow_factory=uow_factory,
        ).execute(
            manufacturer=manufacturer,
            model=model,
            year=year,
            default_bus_diagram_model_id=template.id,
        )

    return _create


@pytest.fixture
def create_bus_use_case(database: Database) -> CreateBusUseCase:
    return CreateBusUseCase(
        bus_query_repo=container.bus_query_repo(),
        seat_diagram_provisioner=container.seat_diagram_provisioner(),
    )


@pytest.fixture
def update_bus_use_case(database: Database) -> UpdateBusUseCase:
    return UpdateBusUseCase(
        bus_query_repo=container.bus_query_repo(),
        seat_diagram_provisioner=container.seat_diagram_provisioner(),
    )


@pytest.fixture
def delete_bus_use_case(database: Database) -> DeleteBusUseCase:
    return DeleteBusUseCase(uow_factory=container.unit_of_work)


@pytest.fixture
def count_rows(database: Database) -> Callable[..., Awaitable[int]]:
    async def _count(table_name: str, **filters: Any) -> int:
        table = Base.metadata.tables[table_name]
        stmt = select(func.count()).select_from(table)
        for column, value in filters.items():
            stmt = stmt.where(table.c[column] == value)
        async with database.session() as session:
            return (await session.execute(stmt)).scalar_one()

    return _count
