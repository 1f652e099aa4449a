from abc import ABC, abstractmethod
from typing import Optional

from src.service.fleet.domain.entity.diagram_entity import SeatDiagram


class ISeatDiagramCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        pass

    @abstractmethod
    async def delete(self, *, seat_diagram_id: int) -> None:
        """Delete the diagram; its seats go with it through ON DELETE CASCADE."""
        pass


class ISeatDiagramQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, seat_diagram_id: int) -> Optional[SeatDiagram]:
        pass
