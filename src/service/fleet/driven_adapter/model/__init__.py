"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.fleet.driven_adapter.model.bus_orm import BusOrm
from src.service.fleet.driven_adapter.model.seat_diagram_orm import (
    BusSeatOrm,
    SeatDiagramOrm,
    SeatDiagramZoneOrm,
)
from src.service.fleet.driven_adapter.model.template_orm import (
    BusDiagramModelOrm,
    BusDiagramModelZoneOrm,
    BusModelOrm,
    BusSeatModelOrm,
)

__all__ = [
    'BusDiagramModelOrm',
    'BusDiagramModelZoneOrm',
    'BusModelOrm',
    'BusOrm',
    'BusSeatModelOrm',
    'BusSeatOrm',
    'SeatDiagramOrm',
    'SeatDiagramZoneOrm',
]
