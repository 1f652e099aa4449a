from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.fleet.domain.entity.zone_entity import SeatDiagramZone


class ISeatDiagramZoneCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, zone: SeatDiagramZone) -> SeatDiagramZone:
        pass

    @abstractmethod
    async def get_by_id(self, *, zone_id: int) -> Optional[SeatDiagramZone]:
        pass

    @abstractmethod
    async def update(self, *, zone: SeatDiagramZone) -> SeatDiagramZone:
        pass

    @abstractmethod
    async def delete_by_seat_diagram_id(self, *, seat_diagram_id: int) -> int:
        pass


class ISeatDiagramZoneQueryRepo(ABC):
    @abstractmethod
    async def list_by_seat_diagram_id(self, *, seat_diagram_id: int) -> List[SeatDiagramZone]:
        pass
