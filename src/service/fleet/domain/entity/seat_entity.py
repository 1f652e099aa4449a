from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs

from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType


DEFAULT_RECLINEMENT_ANGLE = 120


@attrs.define
class BusSeatModel:
    """One cell of a diagram template's seat grid"""

    bus_diagram_model_id: int
    floor_number: int
    position: Dict[str, int]
    seat_number: Optional[str] = None
    space_type: SpaceType = SpaceType.SEAT
    seat_type: SeatType = SeatType.REGULAR
    amenities: List[str] = attrs.field(factory=list)
    reclinement_angle: Optional[int] = DEFAULT_RECLINEMENT_ANGLE
    meta: Dict[str, Any] = attrs.field(factory=dict)
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class BusSeat:
    """One cell of a bus's own seat diagram"""

    seat_diagram_id: int
    floor_number: int
    position: Dict[str, int]
    seat_number: Optional[str] = None
    space_type: SpaceType = SpaceType.SEAT
    seat_type: SeatType = SeatType.REGULAR
    amenities: List[str] = attrs.field(factory=list)
    reclinement_angle: Optional[int] = DEFAULT_RECLINEMENT_ANGLE
    meta: Dict[str, Any] = attrs.field(factory=dict)
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def clone_from(cls, seat_model: BusSeatModel, *, seat_diagram_id: int) -> 'BusSeat':
        # Deep copy of mutable fields so the clone never shares state with the template
        return cls(
            seat_diagram_id=seat_diagram_id,
            floor_number=seat_model.floor_number,
            position=dict(seat_model.position),
            seat_number=seat_model.seat_number,
            space_type=seat_model.space_type,
            seat_type=seat_model.seat_type,
            amenities=list(seat_model.amenities),
            reclinement_angle=seat_model.reclinement_angle,
            meta=dict(seat_model.meta),
            active=seat_model.active,
        )
