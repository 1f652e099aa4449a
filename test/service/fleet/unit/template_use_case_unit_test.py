"""
Unit tests for diagram template and bus model use cases

Test Coverage:
1. CreateBusDiagramModelUseCase: seat generation, total / capacity checks
2. CreateBusModelUseCase: identity conflict, missing template, capacity from template
3. UpdateSeatDiagramZoneUseCase: zone must belong to the seat diagram
"""

from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.fleet.app.command.create_bus_diagram_model_use_case import (
    CreateBusDiagramModelUseCase,
)
from src.service.fleet.app.command.create_bus_model_use_case import CreateBusModelUseCase
from src.service.fleet.app.command.update_seat_diagram_zone_use_case import (
    UpdateSeatDiagramZoneUseCase,
)
from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, FloorSeats
from src.service.fleet.domain.entity.zone_entity import SeatDiagramZone


pytestmark = pytest.mark.unit


class FakeUnitOfWork:
    def __init__(self) -> None:
        self.committed = False
        self.bus_model_command_repo = AsyncMock()
        self.bus_diagram_model_command_repo = AsyncMock()
        self.bus_seat_model_command_repo = AsyncMock()
        self.seat_diagram_zone_command_repo = AsyncMock()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        return None

    async def commit(self):
        self.committed = True


FLOOR = FloorSeats(floor_number=1, num_rows=10, seats_left=2, seats_right=2)


class TestCreateBusDiagramModelUseCase:
    def setup_method(self):
        self.uow = FakeUnitOfWork()
        self.uow.bus_diagram_model_command_repo.create.side_effect = (
            lambda *, bus_diagram_model: attrs.evolve(bus_diagram_model, id=3)
        )
        self.uow.bus_seat_model_command_repo.create_many.side_effect = (
            lambda *, seat_models: seat_models
        )
        self.use_case = CreateBusDiagramModelUseCase(uow_factory=lambda: self.uow)

    @pytest.mark.asyncio
    async def test_creates_template_with_generated_seats(self):
        template = await self.use_case.execute(
            name='Standard 40', max_capacity=40, num_floors=1, seats_per_floor=[FLOOR]
        )

        seat_models = self.uow.bus_seat_model_command_repo.create_many.call_args.kwargs[
            'seat_models'
        ]
        assert template.total_seats == 40
        assert len(seat_models) == 40
        assert {seat.bus_diagram_model_id for seat in seat_models} == {3}
        assert self.uow.committed is True

    @pytest.mark.asyncio
    async def test_total_seats_must_match_grid(self):
        with pytest.raises(DomainError, match='does not match'):
            await self.use_case.execute(
                name='Bad', max_capacity=40, num_floors=1, seats_per_floor=[FLOOR], total_seats=38
            )
        self.uow.bus_diagram_model_command_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_capacity_below_seat_count_rejected(self):
        with pytest.raises(DomainError, match='Max capacity'):
            await self.use_case.execute(
                name='Bad', max_capacity=30, num_floors=1, seats_per_floor=[FLOOR]
            )


class TestCreateBusModelUseCase:
    def setup_method(self):
        self.uow = FakeUnitOfWork()
        self.uow.bus_model_command_repo.create.side_effect = (
            lambda *, bus_model: attrs.evolve(bus_model, id=1)
        )
        self.bus_model_query_repo = AsyncMock()
        self.bus_model_query_repo.get_by_identity.return_value = None
        self.bus_diagram_model_query_repo = AsyncMock()
        self.bus_diagram_model_query_repo.get_by_id.return_value = BusDiagramModel(
            name='Standard 40',
            max_capacity=40,
            num_floors=1,
            seats_per_floor=[FLOOR],
            total_seats=40,
            id=2,
        )
        self.use_case = CreateBusModelUseCase(
            bus_model_query_repo=self.bus_model_query_repo,
            bus_diagram_model_query_repo=self.bus_diagram_model_query_repo,
            uow_factory=lambda: self.uow,
        )

    @pytest.mark.asyncio
    async def test_capacity_defaults_to_template(self):
        bus_model = await self.use_case.execute(
            manufacturer='Volvo', model='9800', year=2024, default_bus_diagram_model_id=2
        )

        assert (bus_model.seating_capacity, bus_model.num_floors) == (40, 1)
        assert self.uow.committed is True

    @pytest.mark.asyncio
    async def test_capacity_mismatch_rejected(self):
        with pytest.raises(DomainError, match='Seating capacity 44'):
            await self.use_case.execute(
                manufacturer='Volvo',
                model='9800',
                year=2024,
                default_bus_diagram_model_id=2,
                seating_capacity=44,
            )

    @pytest.mark.asyncio
    async def test_duplicate_identity_conflicts(self):
        self.bus_model_query_repo.get_by_identity.return_value = object()

        with pytest.raises(ConflictError):
            await self.use_case.execute(
                manufacturer='Volvo', model='9800', year=2024, default_bus_diagram_model_id=2
            )

    @pytest.mark.asyncio
    async def test_missing_template_not_found(self):
        self.bus_diagram_model_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await self.use_case.execute(
                manufacturer='Volvo', model='9800', year=2024, default_bus_diagram_model_id=9
            )


class TestUpdateSeatDiagramZoneUseCase:
    def setup_method(self):
        self.uow = FakeUnitOfWork()
        self.uow.seat_diagram_zone_command_repo.get_by_id.return_value = SeatDiagramZone(
            seat_diagram_id=5, name='Premium', row_numbers=[1, 2], price_multiplier=1.5, id=8
        )
        self.uow.seat_diagram_zone_command_repo.update.side_effect = lambda *, zone: zone
        self.use_case = UpdateSeatDiagramZoneUseCase(uow_factory=lambda: self.uow)

    @pytest.mark.asyncio
    async def test_updates_only_given_fields(self):
        zone = await self.use_case.execute(seat_diagram_id=5, zone_id=8, price_multiplier=2.0)

        assert zone.price_multiplier == 2.0
        assert zone.row_numbers == [1, 2]
        assert self.uow.committed is True

    @pytest.mark.asyncio
    async def test_zone_of_another_diagram_not_found(self):
        with pytest.raises(NotFoundError):
            await self.use_case.execute(seat_diagram_id=6, zone_id=8, name='VIP')
        self.uow.seat_diagram_zone_command_repo.update.assert_not_called()
