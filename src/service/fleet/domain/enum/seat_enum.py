from enum import StrEnum


class SpaceType(StrEnum):
    """What occupies a cell of the seat grid"""

    SEAT = 'SEAT'
    HALLWAY = 'HALLWAY'
    BATHROOM = 'BATHROOM'
    EMPTY = 'EMPTY'
    STAIRS = 'STAIRS'


class SeatType(StrEnum):
    REGULAR = 'REGULAR'
    PREMIUM = 'PREMIUM'
    VIP = 'VIP'
    BUSINESS = 'BUSINESS'
    EXECUTIVE = 'EXECUTIVE'
