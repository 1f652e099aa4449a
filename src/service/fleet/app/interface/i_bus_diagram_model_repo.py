from abc import ABC, abstractmethod
from typing import Optional

from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel


class IBusDiagramModelCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, bus_diagram_model: BusDiagramModel) -> BusDiagramModel:
        pass

    @abstractmethod
    async def get_by_id(self, *, bus_diagram_model_id: int) -> Optional[BusDiagramModel]:
        pass


class IBusDiagramModelQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, bus_diagram_model_id: int) -> Optional[BusDiagramModel]:
        pass
