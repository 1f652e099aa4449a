from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class BusModelCreateRequest(BaseModel):
    manufacturer: str
    model: str
    year: int = Field(ge=1900, le=2100)
    default_bus_diagram_model_id: int
    seating_capacity: Optional[int] = Field(default=None, gt=0)
    num_floors: Optional[int] = Field(default=None, gt=0)
    engine_type: Optional[str] = None
    distribution_type: Optional[str] = None
    amenities: List[str] = []
    active: bool = True

    class Config:
        json_schema_extra = {
            'example': {
                'manufacturer': 'Volvo',
                'model': '9800',
                'year': 2024,
                'default_bus_diagram_model_id': 1,
                'engine_type': 'diesel',
                'amenities': ['wifi', 'usb'],
            }
        }


class BusModelResponse(BaseModel):
    id: int
    manufacturer: str
    model: str
    year: int
    seating_capacity: int
    num_floors: int
    default_bus_diagram_model_id: int
    engine_type: Optional[str] = None
    distribution_type: Optional[str] = None
    amenities: List[str]
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
