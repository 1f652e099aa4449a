"""
Seat Diagram Provisioner

Clones a bus model's diagram template (zones + seats) into a seat diagram owned by
one bus, and swaps it onto the bus when the bus changes model.

Rules:
- template reads happen before the transaction; templates are not edited mid-use
- every write for one bus (diagram, zones, seats, bus row, old diagram removal)
  commits in a single unit of work or not at all
- on replace, the bus is repointed to the new diagram before the old one is deleted
"""

from time import perf_counter
from typing import Any, Callable

import attrs

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.fleet_metrics import metrics
from src.service.fleet.app.interface.i_bus_diagram_model_repo import IBusDiagramModelQueryRepo
from src.service.fleet.app.interface.i_bus_diagram_model_zone_repo import (
    IBusDiagramModelZoneQueryRepo,
)
from src.service.fleet.app.interface.i_bus_model_repo import IBusModelQueryRepo
from src.service.fleet.app.interface.i_bus_seat_model_repo import IBusSeatModelQueryRepo
from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.domain.entity.bus_model_entity import BusModel
from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, SeatDiagram
from src.service.fleet.domain.entity.seat_entity import BusSeat, BusSeatModel
from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone, SeatDiagramZone


@attrs.define(frozen=True)
class DiagramTemplate:
    """Everything read from a bus model's default template before cloning"""

    bus_model: BusModel
    diagram_model: BusDiagramModel
    zones: list[BusDiagramModelZone]
    seat_models: list[BusSeatModel]


class SeatDiagramProvisioner:
    def __init__(
        self,
        *,
        bus_model_query_repo: IBusModelQueryRepo,
        bus_diagram_model_query_repo: IBusDiagramModelQueryRepo,
        bus_diagram_model_zone_query_repo: IBusDiagramModelZoneQueryRepo,
        bus_seat_model_query_repo: IBusSeatModelQueryRepo,
        uow_factory: Callable[[], AbstractUnitOfWork],
    ) -> None:
        self.bus_model_query_repo = bus_model_query_repo
        self.bus_diagram_model_query_repo = bus_diagram_model_query_repo
        self.bus_diagram_model_zone_query_repo = bus_diagram_model_zone_query_repo
        self.bus_seat_model_query_repo = bus_seat_model_query_repo
        self.uow_factory = uow_factory

    @Logger.io
    async def load_template(self, *, model_id: int) -> DiagramTemplate:
        bus_model = await self.bus_model_query_repo.get_by_id(bus_model_id=model_id)
        if not bus_model:
            raise NotFoundError('Bus model not found')

        diagram_model = await self.bus_diagram_model_query_repo.get_by_id(
            bus_diagram_model_id=bus_model.default_bus_diagram_model_id
        )
        if not diagram_model or diagram_model.id is None:
            raise NotFoundError('Bus diagram model not found')

        zones = await self.bus_diagram_model_zone_query_repo.list_by_bus_diagram_model_id(
            bus_diagram_model_id=diagram_model.id
        )
        seat_models = await self.bus_seat_model_query_repo.list_by_bus_diagram_model_id(
            bus_diagram_model_id=diagram_model.id
        )
        return DiagramTemplate(
            bus_model=bus_model,
            diagram_model=diagram_model,
            zones=zones,
            seat_models=seat_models,
        )

    @staticmethod
    def build_seat_diagram(*, template: DiagramTemplate, registration_number: str) -> SeatDiagram:
        # Capacity always comes from the template so create and replace agree
        return SeatDiagram.from_template(
            template=template.diagram_model,
            manufacturer=template.bus_model.manufacturer,
            model=template.bus_model.model,
            registration_number=registration_number,
        )

    async def _clone_into_new_diagram(
        self, uow: AbstractUnitOfWork, *, template: DiagramTemplate, registration_number: str
    ) -> SeatDiagram:
        seat_diagram = await uow.seat_diagram_command_repo.create(
            seat_diagram=self.build_seat_diagram(
                template=template, registration_number=registration_number
            )
        )
        assert seat_diagram.id is not None

        for zone in template.zones:
            await uow.seat_diagram_zone_command_repo.create(
                zone=SeatDiagramZone.clone_from(zone, seat_diagram_id=seat_diagram.id)
            )

        await uow.bus_seat_command_repo.create_many(
            seats=[
                BusSeat.clone_from(seat_model, seat_diagram_id=seat_diagram.id)
                for seat_model in template.seat_models
            ]
        )
        return seat_diagram

    @Logger.io
    async def provision_for_create(self, *, bus: Bus) -> Bus:
        """Persist a new bus together with its own freshly cloned seat diagram."""
        template = await self.load_template(model_id=bus.model_id)
        started_at = perf_counter()

        async with self.uow_factory() as uow:
            seat_diagram = await self._clone_into_new_diagram(
                uow, template=template, registration_number=bus.registration_number
            )
            assert seat_diagram.id is not None
            created_bus = await uow.bus_command_repo.create(
                bus=bus.assign_seat_diagram(seat_diagram.id)
            )
            await uow.commit()

        metrics.record_provisioning(
            operation='create',
            seat_count=len(template.seat_models),
            duration_seconds=perf_counter() - started_at,
        )
        Logger.base.info(
            f'🪑 [PROVISION] Bus {created_bus.id} created with seat diagram {seat_diagram.id} '
            f'({len(template.zones)} zones, {len(template.seat_models)} seats)'
        )
        return created_bus

    @Logger.io
    async def provision_for_update(self, *, bus: Bus, changes: dict[str, Any]) -> Bus:
        """
        Apply an update; when the model changes, swap a new seat diagram onto the bus.

        The status guard runs first so a rejected status never triggers diagram work.
        """
        assert bus.id is not None
        bus.validate_status_change(changes)

        if not bus.is_model_change(changes):
            async with self.uow_factory() as uow:
                updated_bus = await uow.bus_command_repo.update(bus_id=bus.id, changes=changes)
                await uow.commit()
            return updated_bus

        template = await self.load_template(model_id=changes['model_id'])
        registration_number = changes.get('registration_number') or bus.registration_number
        started_at = perf_counter()

        async with self.uow_factory() as uow:
            seat_diagram = await self._clone_into_new_diagram(
                uow, template=template, registration_number=registration_number
            )
            assert seat_diagram.id is not None

            current_bus = await uow.bus_command_repo.get_by_id(bus_id=bus.id, for_update=True)
            if not current_bus:
                raise NotFoundError('Bus not found')
            previous_seat_diagram_id = current_bus.seat_diagram_id

            # Repoint first: the bus must never reference a deleted diagram
            updated_bus = await uow.bus_command_repo.update(
                bus_id=bus.id, changes={**changes, 'seat_diagram_id': seat_diagram.id}
            )

            if previous_seat_diagram_id is not None:
                await uow.seat_diagram_zone_command_repo.delete_by_seat_diagram_id(
                    seat_diagram_id=previous_seat_diagram_id
                )
                await uow.seat_diagram_command_repo.delete(seat_diagram_id=previous_seat_diagram_id)

            await uow.commit()

        metrics.record_provisioning(
            operation='replace',
            seat_count=len(template.seat_models),
            duration_seconds=perf_counter() - started_at,
        )
        Logger.base.info(
            f'🔁 [PROVISION] Bus {bus.id} moved to model {changes["model_id"]}: seat diagram '
            f'{previous_seat_diagram_id} replaced by {seat_diagram.id}'
        )
        return updated_bus
