from src.service.fleet.app.interface.i_bus_diagram_model_repo import (
    IBusDiagramModelCommandRepo,
    IBusDiagramModelQueryRepo,
)
from src.service.fleet.app.interface.i_bus_diagram_model_zone_repo import (
    IBusDiagramModelZoneCommandRepo,
    IBusDiagramModelZoneQueryRepo,
)
from src.service.fleet.app.interface.i_bus_model_repo import (
    IBusModelCommandRepo,
    IBusModelQueryRepo,
)
from src.service.fleet.app.interface.i_bus_repo import IBusCommandRepo, IBusQueryRepo
from src.service.fleet.app.interface.i_bus_seat_model_repo import (
    IBusSeatModelCommandRepo,
    IBusSeatModelQueryRepo,
)
from src.service.fleet.app.interface.i_bus_seat_repo import IBusSeatCommandRepo, IBusSeatQueryRepo
from src.service.fleet.app.interface.i_seat_diagram_repo import (
    ISeatDiagramCommandRepo,
    ISeatDiagramQueryRepo,
)
from src.service.fleet.app.interface.i_seat_diagram_zone_repo import (
    ISeatDiagramZoneCommandRepo,
    ISeatDiagramZoneQueryRepo,
)

__all__ = [
    'IBusCommandRepo',
    'IBusDiagramModelCommandRepo',
    'IBusDiagramModelQueryRepo',
    'IBusDiagramModelZoneCommandRepo',
    'IBusDiagramModelZoneQueryRepo',
    'IBusModelCommandRepo',
    'IBusModelQueryRepo',
    'IBusQueryRepo',
    'IBusSeatCommandRepo',
    'IBusSeatModelCommandRepo',
    'IBusSeatModelQueryRepo',
    'IBusSeatQueryRepo',
    'ISeatDiagramCommandRepo',
    'ISeatDiagramQueryRepo',
    'ISeatDiagramZoneCommandRepo',
    'ISeatDiagramZoneQueryRepo',
]
