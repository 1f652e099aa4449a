"""
Integration tests for fleet command/query repositories

Test Coverage:
1. Bus update guard checks the persisted status, not the caller's copy
2. Unknown fields and missing rows
3. Seat models: bulk insert keeps order, delete by template returns row count
4. The unit of work factory hands out a fresh unit of work per call
"""

import pytest

from src.platform.config.di import container
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.exception.exceptions import InvalidStateTransitionError, NotFoundError
from src.service.fleet.app.command.regenerate_seat_models_use_case import (
    RegenerateSeatModelsUseCase,
)
from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.domain.enum.bus_status import BusStatus


pytestmark = pytest.mark.integration


class TestUnitOfWorkFactory:
    @pytest.mark.asyncio
    async def test_each_call_opens_its_own_unit_of_work(self, database, uow_factory):
        first, second = uow_factory(), uow_factory()

        assert isinstance(first, SqlAlchemyUnitOfWork)
        assert first is not second
        async with first as uow:
            assert await uow.bus_command_repo.get_by_id(bus_id=1) is None


@pytest.fixture
async def bus(create_bus_model, create_bus_use_case, bus_payload) -> Bus:
    bus_model = await create_bus_model(manufacturer='Volvo', model='9800', floors=[(2, 2, 2)])
    return await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=bus_model.id)))


class TestBusCommandRepoImpl:
    @pytest.mark.asyncio
    async def test_status_guard_uses_persisted_row(self, bus, uow_factory):
        # Given: The stored bus is retired
        async with uow_factory() as uow:
            await uow.bus_command_repo.update(bus_id=bus.id, changes={'status': BusStatus.RETIRED})
            await uow.commit()

        # When: Writing ACTIVE straight through the repo
        async with uow_factory() as uow:
            with pytest.raises(InvalidStateTransitionError):
                await uow.bus_command_repo.update(
                    bus_id=bus.id, changes={'status': BusStatus.ACTIVE, 'economic_number': 'X'}
                )

        # Then: Row unchanged
        reloaded = await container.bus_query_repo().get_by_id(bus_id=bus.id)
        assert reloaded.status is BusStatus.RETIRED
        assert reloaded.economic_number == 'ECO-1001'

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, bus, uow_factory):
        async with uow_factory() as uow:
            with pytest.raises(ValueError, match='color'):
                await uow.bus_command_repo.update(bus_id=bus.id, changes={'color': 'red'})

    @pytest.mark.asyncio
    async def test_missing_bus(self, database, uow_factory):
        async with uow_factory() as uow:
            with pytest.raises(NotFoundError):
                await uow.bus_command_repo.update(bus_id=404, changes={'active': False})
            with pytest.raises(NotFoundError):
                await uow.bus_command_repo.delete(bus_id=404)

    @pytest.mark.asyncio
    async def test_lookup_by_identifiers(self, bus):
        bus_query_repo = container.bus_query_repo()

        by_registration = await bus_query_repo.get_by_registration_number(
            registration_number='REG-0001'
        )
        by_plate = await bus_query_repo.get_by_license_plate_number(license_plate_number='PLT-0001')

        assert by_registration.id == by_plate.id == bus.id
        assert await bus_query_repo.get_by_registration_number(registration_number='NOPE') is None


class TestBusSeatModelRepoImpl:
    @pytest.mark.asyncio
    async def test_regenerate_replaces_template_seats(self, create_bus_model, uow_factory):
        bus_model = await create_bus_model(manufacturer='Volvo', model='9800', floors=[(2, 2, 2)])
        template_id = bus_model.default_bus_diagram_model_id

        regenerated = await RegenerateSeatModelsUseCase(uow_factory=uow_factory).execute(
            bus_diagram_model_id=template_id
        )

        after = await container.bus_seat_model_query_repo().list_by_bus_diagram_model_id(
            bus_diagram_model_id=template_id
        )
        assert [seat.seat_number for seat in regenerated] == [str(n) for n in range(1, 9)]
        assert len(after) == 8

    @pytest.mark.asyncio
    async def test_regenerate_unknown_template(self, database, uow_factory):
        with pytest.raises(NotFoundError):
            await RegenerateSeatModelsUseCase(uow_factory=uow_factory).execute(
                bus_diagram_model_id=404
            )
