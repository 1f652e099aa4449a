from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.service.fleet.domain.enum.bus_status import BusStatus
from src.service.fleet.domain.enum.license_plate_type import LicensePlateType


class BusCreateRequest(BaseModel):
    economic_number: str
    registration_number: str
    license_plate_type: LicensePlateType
    license_plate_number: str
    model_id: int
    serial_number: str
    chassis_number: str
    purchase_date: date
    expiration_date: date
    gross_vehicle_weight: float = Field(ge=0)
    status: BusStatus = BusStatus.ACTIVE
    available_for_tourism_only: bool = False
    circulation_card: Optional[str] = None
    erp_client_number: Optional[str] = None
    vehicle_id: Optional[str] = None
    engine_number: Optional[str] = None
    sct_permit: Optional[str] = None
    current_kilometer: Optional[float] = Field(default=None, ge=0)
    gps_id: Optional[str] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    active: bool = True

    class Config:
        json_schema_extra = {
            'example': {
                'economic_number': 'ECO-1001',
                'registration_number': 'REG-2024-0001',
                'license_plate_type': 'NATIONAL',
                'license_plate_number': 'ABC-123-D',
                'model_id': 1,
                'serial_number': 'SN-998877',
                'chassis_number': 'CH-556677',
                'purchase_date': '2024-01-15',
                'expiration_date': '2034-01-15',
                'gross_vehicle_weight': 18000,
                'status': 'ACTIVE',
            }
        }


class BusUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are changed."""

    economic_number: Optional[str] = None
    registration_number: Optional[str] = None
    license_plate_type: Optional[LicensePlateType] = None
    license_plate_number: Optional[str] = None
    model_id: Optional[int] = None
    serial_number: Optional[str] = None
    chassis_number: Optional[str] = None
    purchase_date: Optional[date] = None
    expiration_date: Optional[date] = None
    gross_vehicle_weight: Optional[float] = Field(default=None, ge=0)
    status: Optional[BusStatus] = None
    available_for_tourism_only: Optional[bool] = None
    circulation_card: Optional[str] = None
    erp_client_number: Optional[str] = None
    vehicle_id: Optional[str] = None
    engine_number: Optional[str] = None
    sct_permit: Optional[str] = None
    current_kilometer: Optional[float] = Field(default=None, ge=0)
    gps_id: Optional[str] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    active: Optional[bool] = None

    class Config:
        json_schema_extra = {'example': {'status': 'MAINTENANCE', 'model_id': 2}}


class BusResponse(BaseModel):
    id: int
    economic_number: str
    registration_number: str
    license_plate_type: LicensePlateType
    license_plate_number: str
    model_id: int
    seat_diagram_id: Optional[int]
    serial_number: str
    chassis_number: str
    purchase_date: date
    expiration_date: date
    gross_vehicle_weight: float
    status: BusStatus
    available_for_tourism_only: bool
    circulation_card: Optional[str] = None
    erp_client_number: Optional[str] = None
    vehicle_id: Optional[str] = None
    engine_number: Optional[str] = None
    sct_permit: Optional[str] = None
    current_kilometer: Optional[float] = None
    gps_id: Optional[str] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BusValidNextStatusesResponse(BaseModel):
    data: List[BusStatus]

    class Config:
        json_schema_extra = {'example': {'data': ['MAINTENANCE', 'REPAIR', 'OUT_OF_SERVICE']}}
