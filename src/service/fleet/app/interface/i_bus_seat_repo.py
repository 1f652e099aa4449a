from abc import ABC, abstractmethod
from typing import List

from src.service.fleet.domain.entity.seat_entity import BusSeat


class IBusSeatCommandRepo(ABC):
    @abstractmethod
    async def create_many(self, *, seats: List[BusSeat]) -> List[BusSeat]:
        pass


class IBusSeatQueryRepo(ABC):
    @abstractmethod
    async def list_by_seat_diagram_id(self, *, seat_diagram_id: int) -> List[BusSeat]:
        pass
