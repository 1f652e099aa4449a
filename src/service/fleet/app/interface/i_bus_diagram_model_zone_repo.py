from abc import ABC, abstractmethod
from typing import List

from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone


class IBusDiagramModelZoneCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, zone: BusDiagramModelZone) -> BusDiagramModelZone:
        pass


class IBusDiagramModelZoneQueryRepo(ABC):
    @abstractmethod
    async def list_by_bus_diagram_model_id(
        self, *, bus_diagram_model_id: int
    ) -> List[BusDiagramModelZone]:
        pass
