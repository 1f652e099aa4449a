from typing import List

import attrs

from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, SeatDiagram
from src.service.fleet.domain.entity.seat_entity import BusSeat, BusSeatModel
from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone, SeatDiagramZone


@attrs.define(frozen=True)
class BusDiagramModelDetail:
    diagram_model: BusDiagramModel
    zones: List[BusDiagramModelZone]
    seat_models: List[BusSeatModel]


@attrs.define(frozen=True)
class SeatDiagramDetail:
    seat_diagram: SeatDiagram
    zones: List[SeatDiagramZone]
    seats: List[BusSeat]
