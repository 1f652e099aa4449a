from enum import StrEnum


class BusStatus(StrEnum):
    """Operational status of a bus"""

    ACTIVE = 'ACTIVE'
    MAINTENANCE = 'MAINTENANCE'
    REPAIR = 'REPAIR'
    OUT_OF_SERVICE = 'OUT_OF_SERVICE'
    RESERVED = 'RESERVED'
    IN_TRANSIT = 'IN_TRANSIT'
    RETIRED = 'RETIRED'
