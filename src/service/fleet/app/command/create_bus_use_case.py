from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.command.bus_uniqueness_validator import validate_bus_uniqueness
from src.service.fleet.app.interface.i_bus_repo import IBusQueryRepo
from src.service.fleet.app.seat_diagram_provisioner import SeatDiagramProvisioner
from src.service.fleet.domain.bus_status_domain import (
    ALLOWED_INITIAL_BUS_STATUSES,
    bus_status_machine,
)
from src.service.fleet.domain.entity.bus_entity import Bus


class CreateBusUseCase:
    """
    Register a bus in the fleet.

    Flow:
    1. Validate the initial status and that registration / plate numbers are free
    2. Provisioner clones the bus model's diagram template into a new seat diagram
       and creates the bus pointing at it, in one transaction
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

    @Logger.io
    async def execute(self, *, bus: Bus) -> Bus:
        bus_status_machine.validate_initial_state(bus.status, ALLOWED_INITIAL_BUS_STATUSES)
        await validate_bus_uniqueness(
            self.bus_query_repo,
            registration_number=bus.registration_number,
            license_plate_number=bus.license_plate_number,
        )
        return await self.seat_diagram_provisioner.provision_for_create(bus=bus)
