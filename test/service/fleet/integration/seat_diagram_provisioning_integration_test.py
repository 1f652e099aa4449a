"""
Integration tests for seat diagram provisioning (SQLite, foreign keys on)

Test Coverage:
1. New bus gets its own 40-seat diagram cloned from the template, zones included
2. Model change swaps in a new diagram and removes the old one with its seats
3. Buses of the same model never share a diagram
4. Failed writes roll back every row of the operation, on create and on a model change
5. Illegal status change leaves bus and diagram untouched
6. Deleting a bus removes its diagram, zones and seats
"""

import pytest
from sqlalchemy.exc import IntegrityError

from src.platform.config.di import container
from src.platform.exception.exceptions import InvalidStateTransitionError
from src.service.fleet.app.command.update_seat_diagram_zone_use_case import (
    UpdateSeatDiagramZoneUseCase,
)
from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.domain.enum.bus_status import BusStatus
from src.service.fleet.driven_adapter.repo.seat_diagram_repo_impl import SeatDiagramCommandRepoImpl


pytestmark = pytest.mark.integration

SINGLE_DECK = [(10, 2, 2)]
DOUBLE_DECK = [(8, 2, 2), (10, 2, 2)]


@pytest.mark.asyncio
async def test_new_bus_gets_cloned_seat_diagram(create_bus_model, create_bus_use_case, bus_payload):
    # Given: A 40 seat template with a Premium zone on rows 1-3
    bus_model = await create_bus_model(
        manufacturer='Volvo', model='9800', floors=SINGLE_DECK, zones=[('Premium', [1, 2, 3], 1.5)]
    )

    # When: Creating a bus of that model
    bus = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=bus_model.id)))

    # Then: The bus owns a fresh diagram with the template's layout
    assert bus.id is not None and bus.seat_diagram_id is not None
    seat_diagram = await container.seat_diagram_query_repo().get_by_id(
        seat_diagram_id=bus.seat_diagram_id
    )
    zones = await container.seat_diagram_zone_query_repo().list_by_seat_diagram_id(
        seat_diagram_id=bus.seat_diagram_id
    )
    seats = await container.bus_seat_query_repo().list_by_seat_diagram_id(
        seat_diagram_id=bus.seat_diagram_id
    )

    assert seat_diagram is not None
    assert seat_diagram.name == 'Volvo 9800 - REG-0001'
    assert seat_diagram.bus_diagram_model_id == bus_model.default_bus_diagram_model_id
    assert (seat_diagram.max_capacity, seat_diagram.total_seats) == (40, 40)
    assert seat_diagram.is_factory_default is False
    assert [(z.name, z.row_numbers, z.price_multiplier) for z in zones] == [
        ('Premium', [1, 2, 3], 1.5)
    ]
    assert len(seats) == 40
    assert sorted(int(seat.seat_number) for seat in seats) == list(range(1, 41))


@pytest.mark.asyncio
async def test_model_change_replaces_seat_diagram(
    create_bus_model, create_bus_use_case, update_bus_use_case, bus_payload, count_rows
):
    # Given: A bus on a single deck model, and a double deck model with two zones
    model_a = await create_bus_model(
        manufacturer='Volvo', model='9800', floors=SINGLE_DECK, zones=[('Premium', [1, 2, 3], 1.5)]
    )
    model_b = await create_bus_model(
        manufacturer='Irizar',
        model='i8 DD',
        floors=DOUBLE_DECK,
        zones=[('Panoramic', [1], 2.0), ('Lower deck', [2, 3, 4], 1.2)],
    )
    bus = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=model_a.id)))
    old_seat_diagram_id = bus.seat_diagram_id

    # When: Moving the bus to model B
    updated = await update_bus_use_case.execute(bus_id=bus.id, changes={'model_id': model_b.id})

    # Then: The bus points at a new 72 seat diagram
    assert updated.model_id == model_b.id
    assert updated.seat_diagram_id != old_seat_diagram_id
    new_diagram = await container.seat_diagram_query_repo().get_by_id(
        seat_diagram_id=updated.seat_diagram_id
    )
    assert new_diagram is not None
    assert (new_diagram.num_floors, new_diagram.total_seats) == (2, 72)
    assert await count_rows('bus_seat', seat_diagram_id=updated.seat_diagram_id) == 72
    assert await count_rows('seat_diagram_zone', seat_diagram_id=updated.seat_diagram_id) == 2

    # And: The old diagram, its zones and its seats are gone
    assert (
        await container.seat_diagram_query_repo().get_by_id(seat_diagram_id=old_seat_diagram_id)
        is None
    )
    assert await count_rows('bus_seat', seat_diagram_id=old_seat_diagram_id) == 0
    assert await count_rows('seat_diagram_zone', seat_diagram_id=old_seat_diagram_id) == 0
    assert await count_rows('seat_diagram') == 1


@pytest.mark.asyncio
async def test_update_without_model_change_keeps_seat_diagram(
    create_bus_model, create_bus_use_case, update_bus_use_case, bus_payload
):
    bus_model = await create_bus_model(manufacturer='Volvo', model='9800', floors=SINGLE_DECK)
    bus = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=bus_model.id)))

    updated = await update_bus_use_case.execute(
        bus_id=bus.id, changes={'status': BusStatus.MAINTENANCE, 'current_kilometer': 1500.0}
    )

    assert updated.status is BusStatus.MAINTENANCE
    assert updated.current_kilometer == 1500.0
    assert updated.seat_diagram_id == bus.seat_diagram_id


@pytest.mark.asyncio
async def test_buses_of_same_model_get_independent_diagrams(
    create_bus_model, create_bus_use_case, bus_payload
):
    # Given: Two buses of the same model
    bus_model = await create_bus_model(
        manufacturer='Volvo', model='9800', floors=SINGLE_DECK, zones=[('Premium', [1, 2, 3], 1.5)]
    )
    first = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=bus_model.id)))
    second = await create_bus_use_case.execute(
        bus=Bus(
            **bus_payload(
                model_id=bus_model.id,
                registration_number='REG-0002',
                license_plate_number='PLT-0002',
            )
        )
    )
    assert first.seat_diagram_id != second.seat_diagram_id

    # When: Repricing the first bus's Premium zone
    zone_repo = container.seat_diagram_zone_query_repo()
    (first_zone,) = await zone_repo.list_by_seat_diagram_id(seat_diagram_id=first.seat_diagram_id)
    await UpdateSeatDiagramZoneUseCase(uow_factory=container.unit_of_work).execute(
        seat_diagram_id=first.seat_diagram_id, zone_id=first_zone.id, price_multiplier=3.0
    )

    # Then: Neither the other bus nor the template is affected
    (second_zone,) = await zone_repo.list_by_seat_diagram_id(seat_diagram_id=second.seat_diagram_id)
    template_zone_repo = container.bus_diagram_model_zone_query_repo()
    (template_zone,) = await template_zone_repo.list_by_bus_diagram_model_id(
        bus_diagram_model_id=bus_model.default_bus_diagram_model_id
    )
    assert second_zone.price_multiplier == 1.5
    assert template_zone.price_multiplier == 1.5


@pytest.mark.asyncio
async def test_failed_create_rolls_back_every_row(
    create_bus_model, seat_diagram_provisioner, bus_payload, count_rows
):
    # Given: A bus already holds REG-0001
    bus_model = await create_bus_model(
        manufacturer='Volvo', model='9800', floors=SINGLE_DECK, zones=[('Premium', [1], 1.5)]
    )
    await seat_diagram_provisioner.provision_for_create(
        bus=Bus(**bus_payload(model_id=bus_model.id))
    )

    # When: Provisioning a second bus that violates the unique registration number
    with pytest.raises(IntegrityError):
        await seat_diagram_provisioner.provision_for_create(
            bus=Bus(**bus_payload(model_id=bus_model.id, license_plate_number='PLT-0002'))
        )

    # Then: Only the first bus's diagram exists
    assert await count_rows('bus') == 1
    assert await count_rows('seat_diagram') == 1
    assert await count_rows('seat_diagram_zone') == 1
    assert await count_rows('bus_seat') == 40


@pytest.mark.asyncio
async def test_failed_model_change_rolls_back_the_swap(
    create_bus_model, create_bus_use_case, update_bus_use_case, bus_payload, count_rows, monkeypatch
):
    # Given: A bus on the single deck model
    model_a = await create_bus_model(
        manufacturer='Volvo', model='9800', floors=SINGLE_DECK, zones=[('Premium', [1], 1.5)]
    )
    model_b = await create_bus_model(
        manufacturer='Irizar',
        model='i8 DD',
        floors=DOUBLE_DECK,
        zones=[('Premium', [1], 1.5), ('Upper', [9], 1.2)],
    )
    bus = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=model_a.id)))

    # When: Removing the old diagram fails after the bus was repointed
    async def failing_delete(self, *, seat_diagram_id: int) -> None:
        raise RuntimeError('seat diagram delete failed')

    monkeypatch.setattr(SeatDiagramCommandRepoImpl, 'delete', failing_delete)
    with pytest.raises(RuntimeError, match='seat diagram delete failed'):
        await update_bus_use_case.execute(bus_id=bus.id, changes={'model_id': model_b.id})

    # Then: The bus keeps its old model and diagram; no new diagram rows persist
    reloaded = await container.bus_query_repo().get_by_id(bus_id=bus.id)
    assert reloaded is not None
    assert reloaded.model_id == model_a.id
    assert reloaded.seat_diagram_id == bus.seat_diagram_id
    assert await count_rows('seat_diagram') == 1
    assert await count_rows('seat_diagram_zone') == 1
    assert await count_rows('bus_seat') == 40
    assert await count_rows('bus_seat', seat_diagram_id=bus.seat_diagram_id) == 40


@pytest.mark.asyncio
async def test_illegal_status_change_leaves_bus_untouched(
    create_bus_model, create_bus_use_case, update_bus_use_case, bus_payload, count_rows
):
    # Given: A retired bus
    model_a = await create_bus_model(manufacturer='Volvo', model='9800', floors=SINGLE_DECK)
    model_b = await create_bus_model(manufacturer='Irizar', model='i8 DD', floors=DOUBLE_DECK)
    bus = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=model_a.id)))
    bus = await update_bus_use_case.execute(
        bus_id=bus.id, changes={'status': BusStatus.RETIRED}
    )

    # When: Reactivating it directly while also changing its model
    with pytest.raises(InvalidStateTransitionError):
        await update_bus_use_case.execute(
            bus_id=bus.id, changes={'status': BusStatus.ACTIVE, 'model_id': model_b.id}
        )

    # Then: Nothing changed
    reloaded = await container.bus_query_repo().get_by_id(bus_id=bus.id)
    assert reloaded is not None
    assert reloaded.status is BusStatus.RETIRED
    assert reloaded.model_id == model_a.id
    assert reloaded.seat_diagram_id == bus.seat_diagram_id
    assert await count_rows('seat_diagram') == 1


@pytest.mark.asyncio
async def test_delete_bus_removes_its_seat_diagram(
    create_bus_model, create_bus_use_case, delete_bus_use_case, bus_payload, count_rows
):
    bus_model = await create_bus_model(
        manufacturer='Volvo', model='9800', floors=SINGLE_DECK, zones=[('Premium', [1], 1.5)]
    )
    bus = await create_bus_use_case.execute(bus=Bus(**bus_payload(model_id=bus_model.id)))

    await delete_bus_use_case.execute(bus_id=bus.id)

    assert await count_rows('bus') == 0
    assert await count_rows('seat_diagram') == 0
    assert await count_rows('seat_diagram_zone') == 0
    assert await count_rows('bus_seat') == 0
    # Template untouched
    assert await count_rows('bus_seat_model') == 40
    assert await count_rows('bus_diagram_model_zone') == 1
