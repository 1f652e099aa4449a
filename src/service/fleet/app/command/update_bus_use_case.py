from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidStateTransitionError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.fleet_metrics import metrics
from src.service.fleet.app.command.bus_uniqueness_validator import validate_bus_uniqueness
from src.service.fleet.app.interface.i_bus_repo import IBusQueryRepo
from src.service.fleet.app.seat_diagram_provisioner import SeatDiagramProvisioner
from src.service.fleet.domain.entity.bus_entity import PROTECTED_FIELDS, Bus


class UpdateBusUseCase:
    """
    Update a bus.

    Fail fast, in order, before anything is written:
    - bus must exist
    - a status change must be allowed by the bus status machine
    - protected fields (seat_diagram_id, ...) are rejected
    - new registration / plate numbers must be free
    A model change then goes through the provisioner's atomic seat diagram swap.
    """

    def __init__(
        self,
        *,
        bus_query_repo: IBusQueryRepo,
        seat_diagram_provisioner: SeatDiagramProvisioner,
    ) -> None:
        self.bus_query_repo = bus_query_repo
        self.seat_diagram_provisioner = seat_diagram_provisioner

    @classmethod
    @inject
    def depends(
        cls,
        bus_query_repo: IBusQueryRepo = Depends(Provide[Container.bus_query_repo]),
        seat_diagram_provisioner: SeatDiagramProvisioner = Depends(
            Provide[Container.seat_diagram_provisioner]
        ),
    ) -> Self:
        return cls(bus_query_repo=bus_query_repo, seat_diagram_provisioner=seat_diagram_provisioner)

    def _check_status_change(self, bus: Bus, changes: dict[str, Any]) -> None:
        if changes.get('status') is None:
            return
        try:
            bus.validate_status_change(changes)
        except InvalidStateTransitionError:
            metrics.record_status_transition(
                from_status=str(bus.status), to_status=str(changes['status']), accepted=False
            )
            raise

    @Logger.io
    async def execute(self, *, bus_id: int, changes: dict[str, Any]) -> Bus:
        bus = await self.bus_query_repo.get_by_id(bus_id=bus_id)
        if not bus:
            raise NotFoundError('Bus not found')

        self._check_status_change(bus, changes)
        # Protected fields and field validators
        bus.apply_changes(changes)

        await validate_bus_uniqueness(
            self.bus_query_repo,
            registration_number=changes.get('registration_number'),
            license_plate_number=changes.get('license_plate_number'),
            current_bus_id=bus_id,
        )

        if not changes:
            return bus

        updated = await self.seat_diagram_provisioner.provision_for_update(bus=bus, changes=changes)
        if changes.get('status') is not None:
            metrics.record_status_transition(
                from_status=str(bus.status), to_status=str(changes['status']), accepted=True
            )
        return updated
