"""
Unit tests for SeatDiagramProvisioner

Test Coverage:
1. Create: template cloned into a new diagram, bus points at it, one commit
2. Replace: new diagram cloned, bus repointed BEFORE the old diagram is deleted
3. Plain update without model change skips diagram work
4. Missing bus model / template and rejected status fail before any write
5. A failing write leaves the unit of work uncommitted
"""

from datetime import date
from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import InvalidStateTransitionError, NotFoundError
from src.service.fleet.app.seat_diagram_provisioner import SeatDiagramProvisioner
from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.domain.entity.bus_model_entity import BusModel
from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, FloorSeats
from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone
from src.service.fleet.domain.enum.bus_status import BusStatus
from src.service.fleet.domain.seat_layout_domain import generate_seat_models


pytestmark = pytest.mark.unit

NEW_SEAT_DIAGRAM_ID = 100
OLD_SEAT_DIAGRAM_ID = 10


class FakeUnitOfWork:
    """Records every repo write in order; commit only flips a flag."""

    def __init__(self, *, current_bus: Bus | None = None) -> None:
        self.calls: list[tuple] = []
        self.committed = False

        self.seat_diagram_command_repo = AsyncMock()
        self.seat_diagram_zone_command_repo = AsyncMock()
        self.bus_seat_command_repo = AsyncMock()
        self.bus_command_repo = AsyncMock()

        async def create_seat_diagram(*, seat_diagram):
            self.calls.append(('create_seat_diagram', seat_diagram.bus_diagram_model_id))
            return attrs.evolve(seat_diagram, id=NEW_SEAT_DIAGRAM_ID)

        async def create_zone(*, zone):
            self.calls.append(('create_zone', zone.seat_diagram_id))
            return zone

        async def create_seats(*, seats):
            self.calls.append(('create_seats', len(seats)))
            return seats

        async def create_bus(*, bus):
            self.calls.append(('create_bus', bus.seat_diagram_id))
            return attrs.evolve(bus, id=1)

        async def update_bus(*, bus_id, changes):
            self.calls.append(('update_bus', changes.get('seat_diagram_id')))
            return attrs.evolve(current_bus, **changes) if current_bus else None

        async def delete_zones(*, seat_diagram_id):
            self.calls.append(('delete_zones', seat_diagram_id))
            return 1

        async def delete_seat_diagram(*, seat_diagram_id):
            self.calls.append(('delete_seat_diagram', seat_diagram_id))

        self.seat_diagram_command_repo.create.side_effect = create_seat_diagram
        self.seat_diagram_command_repo.delete.side_effect = delete_seat_diagram
        self.seat_diagram_zone_command_repo.create.side_effect = create_zone
        self.seat_diagram_zone_command_repo.delete_by_seat_diagram_id.side_effect = delete_zones
        self.bus_seat_command_repo.create_many.side_effect = create_seats
        self.bus_command_repo.create.side_effect = create_bus
        self.bus_command_repo.update.side_effect = update_bus
        self.bus_command_repo.get_by_id.return_value = current_bus

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        return None

    async def commit(self):
        self.committed = True


def _template(template_id: int, *, rows: int = 10, floors: int = 1) -> BusDiagramModel:
    seats_per_floor = [
        FloorSeats(floor_number=n, num_rows=rows, seats_left=2, seats_right=2)
        for n in range(1, floors + 1)
    ]
    total = rows * 4 * floors
    return BusDiagramModel(
        name=f'Template {template_id}',
        max_capacity=total,
        num_floors=floors,
        seats_per_floor=seats_per_floor,
        total_seats=total,
        id=template_id,
    )


def _bus(**overrides) -> Bus:
    fields = {
        'economic_number': 'ECO-1',
        'registration_number': 'REG-1',
        'license_plate_type': 'NATIONAL',
        'license_plate_number': 'PLT-1',
        'model_id': 1,
        'serial_number': 'SN-1',
        'chassis_number': 'CH-1',
        'purchase_date': date(2024, 1, 1),
        'expiration_date': date(2030, 1, 1),
        'gross_vehicle_weight': 15000.0,
    }
    fields.update(overrides)
    return Bus(**fields)


class TestSeatDiagramProvisioner:
    def setup_method(self):
        self.templates = {2: _template(2), 3: _template(3, rows=9, floors=2)}
        self.bus_models = {
            1: BusModel(
                manufacturer='Volvo',
                model='9800',
                year=2024,
                seating_capacity=40,
                num_floors=1,
                default_bus_diagram_model_id=2,
                id=1,
            ),
            2: BusModel(
                manufacturer='Irizar',
                model='i8',
                year=2024,
                seating_capacity=72,
                num_floors=2,
                default_bus_diagram_model_id=3,
                id=2,
            ),
        }

        self.bus_model_query_repo = AsyncMock()
        self.bus_model_query_repo.get_by_id.side_effect = (
            lambda *, bus_model_id: self.bus_models.get(bus_model_id)
        )
        self.bus_diagram_model_query_repo = AsyncMock()
        self.bus_diagram_model_query_repo.get_by_id.side_effect = (
            lambda *, bus_diagram_model_id: self.templates.get(bus_diagram_model_id)
        )
        self.zone_query_repo = AsyncMock()
        self.zone_query_repo.list_by_bus_diagram_model_id.side_effect = (
            lambda *, bus_diagram_model_id: [
                BusDiagramModelZone(
                    bus_diagram_model_id=bus_diagram_model_id,
                    name='Premium',
                    row_numbers=[1, 2, 3],
                    price_multiplier=1.5,
                    id=1,
                )
            ]
        )
        self.seat_model_query_repo = AsyncMock()
        self.seat_model_query_repo.list_by_bus_diagram_model_id.side_effect = (
            lambda *, bus_diagram_model_id: generate_seat_models(
                bus_diagram_model_id=bus_diagram_model_id,
                num_floors=self.templates[bus_diagram_model_id].num_floors,
                seats_per_floor=self.templates[bus_diagram_model_id].seats_per_floor,
            )
        )

        self.existing_bus = _bus(id=1, seat_diagram_id=OLD_SEAT_DIAGRAM_ID)
        self.uow = FakeUnitOfWork(current_bus=self.existing_bus)
        self.uow_opened = 0

        def _factory():
            self.uow_opened += 1
            return self.uow

        self.provisioner = SeatDiagramProvisioner(
            bus_model_query_repo=self.bus_model_query_repo,
            bus_diagram_model_query_repo=self.bus_diagram_model_query_repo,
            bus_diagram_model_zone_query_repo=self.zone_query_repo,
            bus_seat_model_query_repo=self.seat_model_query_repo,
            uow_factory=_factory,
        )

    # ==================== Create ====================

    @pytest.mark.asyncio
    async def test_create_clones_template_and_points_bus_at_it(self):
        # When: Provisioning a new bus of model 1 (40 seats, one zone)
        bus = await self.provisioner.provision_for_create(bus=_bus())

        # Then: One diagram, its zone and 40 seats were written before the bus
        assert self.uow.calls == [
            ('create_seat_diagram', 2),
            ('create_zone', NEW_SEAT_DIAGRAM_ID),
            ('create_seats', 40),
            ('create_bus', NEW_SEAT_DIAGRAM_ID),
        ]
        assert bus.seat_diagram_id == NEW_SEAT_DIAGRAM_ID
        assert self.uow.committed is True

    @pytest.mark.asyncio
    async def test_created_diagram_takes_capacity_from_template(self):
        await self.provisioner.provision_for_create(bus=_bus(registration_number='REG-9'))

        seat_diagram = self.uow.seat_diagram_command_repo.create.call_args.kwargs['seat_diagram']
        assert seat_diagram.name == 'Volvo 9800 - REG-9'
        assert (seat_diagram.max_capacity, seat_diagram.total_seats) == (40, 40)
        assert seat_diagram.is_factory_default is False

    @pytest.mark.asyncio
    async def test_cloned_seats_belong_to_new_diagram(self):
        await self.provisioner.provision_for_create(bus=_bus())

        seats = self.uow.bus_seat_command_repo.create_many.call_args.kwargs['seats']
        assert {seat.seat_diagram_id for seat in seats} == {NEW_SEAT_DIAGRAM_ID}
        assert [seat.seat_number for seat in seats] == [str(n) for n in range(1, 41)]

    @pytest.mark.asyncio
    async def test_create_with_unknown_model_writes_nothing(self):
        with pytest.raises(NotFoundError, match='Bus model not found'):
            await self.provisioner.provision_for_create(bus=_bus(model_id=999))
        assert self.uow_opened == 0

    @pytest.mark.asyncio
    async def test_create_with_missing_template_writes_nothing(self):
        self.templates.pop(2)
        with pytest.raises(NotFoundError, match='Bus diagram model not found'):
            await self.provisioner.provision_for_create(bus=_bus())
        assert self.uow_opened == 0

    @pytest.mark.asyncio
    async def test_failed_write_is_not_committed(self):
        # Given: Seat insert fails halfway through the clone
        self.uow.bus_seat_command_repo.create_many.side_effect = RuntimeError('db down')

        with pytest.raises(RuntimeError):
            await self.provisioner.provision_for_create(bus=_bus())

        # Then: Bus never created, nothing committed
        assert ('create_bus', NEW_SEAT_DIAGRAM_ID) not in self.uow.calls
        assert self.uow.committed is False

    # ==================== Update ====================

    @pytest.mark.asyncio
    async def test_update_without_model_change_skips_diagram_work(self):
        bus = await self.provisioner.provision_for_update(
            bus=self.existing_bus, changes={'economic_number': 'ECO-2'}
        )

        assert self.uow.calls == [('update_bus', None)]
        assert bus.economic_number == 'ECO-2'
        self.bus_model_query_repo.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_model_change_repoints_bus_before_deleting_old_diagram(self):
        # When: Bus moves from model 1 to model 2 (two floors, 72 seats)
        bus = await self.provisioner.provision_for_update(
            bus=self.existing_bus, changes={'model_id': 2}
        )

        # Then: New diagram is cloned, bus repointed, then old zones and diagram removed
        assert self.uow.calls == [
            ('create_seat_diagram', 3),
            ('create_zone', NEW_SEAT_DIAGRAM_ID),
            ('create_seats', 72),
            ('update_bus', NEW_SEAT_DIAGRAM_ID),
            ('delete_zones', OLD_SEAT_DIAGRAM_ID),
            ('delete_seat_diagram', OLD_SEAT_DIAGRAM_ID),
        ]
        assert bus.model_id == 2
        assert bus.seat_diagram_id == NEW_SEAT_DIAGRAM_ID
        assert self.uow.committed is True

    @pytest.mark.asyncio
    async def test_model_change_uses_new_registration_number_for_name(self):
        await self.provisioner.provision_for_update(
            bus=self.existing_bus, changes={'model_id': 2, 'registration_number': 'REG-NEW'}
        )

        seat_diagram = self.uow.seat_diagram_command_repo.create.call_args.kwargs['seat_diagram']
        assert seat_diagram.name == 'Irizar i8 - REG-NEW'

    @pytest.mark.asyncio
    async def test_rejected_status_stops_before_any_template_read(self):
        retired_bus = _bus(id=1, seat_diagram_id=OLD_SEAT_DIAGRAM_ID, status=BusStatus.RETIRED)

        with pytest.raises(InvalidStateTransitionError):
            await self.provisioner.provision_for_update(
                bus=retired_bus, changes={'model_id': 2, 'status': BusStatus.ACTIVE}
            )

        self.bus_model_query_repo.get_by_id.assert_not_called()
        assert self.uow_opened == 0

    @pytest.mark.asyncio
    async def test_model_change_to_unknown_model_keeps_old_diagram(self):
        with pytest.raises(NotFoundError):
            await self.provisioner.provision_for_update(
                bus=self.existing_bus, changes={'model_id': 404}
            )
        assert self.uow.calls == []
