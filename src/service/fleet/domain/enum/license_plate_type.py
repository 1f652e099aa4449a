from enum import StrEnum


class LicensePlateType(StrEnum):
    NATIONAL = 'NATIONAL'
    INTERNATIONAL = 'INTERNATIONAL'
    TOURISM = 'TOURISM'
