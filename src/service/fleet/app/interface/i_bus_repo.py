from abc import ABC, abstractmethod
from typing import Any, List, Optional

from src.service.fleet.domain.entity.bus_entity import Bus


class IBusCommandRepo(ABC):
    """Bus writes, bound to the unit of work's transaction"""

    @abstractmethod
    async def get_by_id(self, *, bus_id: int, for_update: bool = False) -> Optional[Bus]:
        pass

    @abstractmethod
    async def create(self, *, bus: Bus) -> Bus:
        pass

    @abstractmethod
    async def update(self, *, bus_id: int, changes: dict[str, Any]) -> Bus:
        """Apply changes; a `status` change is checked against the persisted status first."""
        pass

    @abstractmethod
    async def delete(self, *, bus_id: int) -> None:
        pass


class IBusQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, bus_id: int) -> Optional[Bus]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Bus]:
        pass

    @abstractmethod
    async def get_by_registration_number(self, *, registration_number: str) -> Optional[Bus]:
        pass

    @abstractmethod
    async def get_by_license_plate_number(self, *, license_plate_number: str) -> Optional[Bus]:
        pass
