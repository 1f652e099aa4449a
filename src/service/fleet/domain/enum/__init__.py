from src.service.fleet.domain.enum.bus_status import BusStatus
from src.service.fleet.domain.enum.license_plate_type import LicensePlateType
from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType

__all__ = [
    'BusStatus',
    'LicensePlateType',
    'SeatType',
    'SpaceType',
]
