from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.domain.entity.bus_model_entity import BusModel
from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, FloorSeats, SeatDiagram
from src.service.fleet.domain.entity.seat_entity import BusSeat, BusSeatModel
from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone, SeatDiagramZone

__all__ = [
    'Bus',
    'BusDiagramModel',
    'BusDiagramModelZone',
    'BusModel',
    'BusSeat',
    'BusSeatModel',
    'FloorSeats',
    'SeatDiagram',
    'SeatDiagramZone',
]
