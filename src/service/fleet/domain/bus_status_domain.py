"""
Bus Status Domain

Legal operational status changes for a bus. Every state may stay where it is;
RETIRED can only go back into service through OUT_OF_SERVICE.
"""

from src.platform.state_machine.state_machine import StateMachine
from src.service.fleet.domain.enum.bus_status import BusStatus


BUS_STATUS_TRANSITIONS: dict[BusStatus, list[BusStatus]] = {
    BusStatus.ACTIVE: [
        BusStatus.ACTIVE,
        BusStatus.MAINTENANCE,
        BusStatus.REPAIR,
        BusStatus.OUT_OF_SERVICE,
        BusStatus.RESERVED,
        BusStatus.IN_TRANSIT,
        BusStatus.RETIRED,
    ],
    BusStatus.MAINTENANCE: [
        BusStatus.MAINTENANCE,
        BusStatus.ACTIVE,
        BusStatus.REPAIR,
        BusStatus.OUT_OF_SERVICE,
        BusStatus.RETIRED,
    ],
    BusStatus.REPAIR: [
        BusStatus.REPAIR,
        BusStatus.ACTIVE,
        BusStatus.MAINTENANCE,
        BusStatus.OUT_OF_SERVICE,
        BusStatus.RETIRED,
    ],
    BusStatus.OUT_OF_SERVICE: [
        BusStatus.OUT_OF_SERVICE,
        BusStatus.ACTIVE,
        BusStatus.MAINTENANCE,
        BusStatus.REPAIR,
        BusStatus.RETIRED,
    ],
    BusStatus.RESERVED: [
        BusStatus.RESERVED,
        BusStatus.ACTIVE,
        BusStatus.IN_TRANSIT,
        BusStatus.MAINTENANCE,
    ],
    BusStatus.IN_TRANSIT: [
        BusStatus.IN_TRANSIT,
        BusStatus.ACTIVE,
        BusStatus.MAINTENANCE,
        BusStatus.REPAIR,
    ],
    BusStatus.RETIRED: [
        BusStatus.RETIRED,
        BusStatus.OUT_OF_SERVICE,
    ],
}

# A new bus cannot enter the fleet already retired or on the road
ALLOWED_INITIAL_BUS_STATUSES: tuple[BusStatus, ...] = (
    BusStatus.ACTIVE,
    BusStatus.MAINTENANCE,
    BusStatus.REPAIR,
    BusStatus.OUT_OF_SERVICE,
    BusStatus.RESERVED,
)

bus_status_machine: StateMachine[BusStatus] = StateMachine(
    entity='Bus', transitions=BUS_STATUS_TRANSITIONS
)
