from abc import ABC, abstractmethod
from typing import List

from src.service.fleet.domain.entity.seat_entity import BusSeatModel


class IBusSeatModelCommandRepo(ABC):
    @abstractmethod
    async def create_many(self, *, seat_models: List[BusSeatModel]) -> List[BusSeatModel]:
        pass

    @abstractmethod
    async def delete_by_bus_diagram_model_id(self, *, bus_diagram_model_id: int) -> int:
        """Delete every seat model of a template, returning how many were removed."""
        pass


class IBusSeatModelQueryRepo(ABC):
    @abstractmethod
    async def list_by_bus_diagram_model_id(
        self, *, bus_diagram_model_id: int
    ) -> List[BusSeatModel]:
        pass
