from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.fleet.domain.entity.bus_model_entity import BusModel


class IBusModelCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, bus_model: BusModel) -> BusModel:
        pass


class IBusModelQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, bus_model_id: int) -> Optional[BusModel]:
        pass

    @abstractmethod
    async def get_by_identity(
        self, *, manufacturer: str, model: str, year: int
    ) -> Optional[BusModel]:
        pass

    @abstractmethod
    async def list_all(self) -> List[BusModel]:
        pass
