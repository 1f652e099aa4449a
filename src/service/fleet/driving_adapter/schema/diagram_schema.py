from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType


class FloorSeatsSchema(BaseModel):
    floor_number: int = Field(gt=0)
    num_rows: int = Field(gt=0)
    seats_left: int = Field(ge=0)
    seats_right: int = Field(ge=0)


class BusDiagramModelCreateRequest(BaseModel):
    name: str
    description: Optional[str] = None
    max_capacity: int = Field(gt=0)
    num_floors: int = Field(gt=0)
    seats_per_floor: List[FloorSeatsSchema]
    total_seats: Optional[int] = Field(default=None, ge=0)
    is_factory_default: bool = True
    active: bool = True

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Standard 40',
                'max_capacity': 40,
                'num_floors': 1,
                'seats_per_floor': [
                    {'floor_number': 1, 'num_rows': 10, 'seats_left': 2, 'seats_right': 2}
                ],
            }
        }


class ZoneCreateRequest(BaseModel):
    name: str
    row_numbers: List[int]
    price_multiplier: float = Field(default=1.0, gt=0)

    class Config:
        json_schema_extra = {
            'example': {'name': 'Premium', 'row_numbers': [1, 2, 3], 'price_multiplier': 1.5}
        }


class ZoneUpdateRequest(BaseModel):
    name: Optional[str] = None
    row_numbers: Optional[List[int]] = None
    price_multiplier: Optional[float] = Field(default=None, gt=0)

    class Config:
        json_schema_extra = {'example': {'price_multiplier': 1.8}}


class ZoneResponse(BaseModel):
    id: int
    name: str
    row_numbers: List[int]
    price_multiplier: float
    bus_diagram_model_id: Optional[int] = None
    seat_diagram_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SeatResponse(BaseModel):
    id: int
    floor_number: int
    seat_number: Optional[str]
    position: Dict[str, int]
    space_type: SpaceType
    seat_type: SeatType
    amenities: List[str]
    reclinement_angle: Optional[int]
    meta: Dict[str, Any]
    active: bool
    bus_diagram_model_id: Optional[int] = None
    seat_diagram_id: Optional[int] = None


class BusDiagramModelResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    max_capacity: int
    num_floors: int
    seats_per_floor: List[FloorSeatsSchema]
    total_seats: int
    is_factory_default: bool
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BusDiagramModelDetailResponse(BusDiagramModelResponse):
    zones: List[ZoneResponse]
    seat_models: List[SeatResponse]


class SeatDiagramResponse(BaseModel):
    id: int
    bus_diagram_model_id: int
    name: str
    max_capacity: int
    num_floors: int
    seats_per_floor: List[FloorSeatsSchema]
    total_seats: int
    is_factory_default: bool
    active: bool
    zones: List[ZoneResponse]
    seats: List[SeatResponse]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
