from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_diagram_model_repo import (
    IBusDiagramModelCommandRepo,
    IBusDiagramModelQueryRepo,
)
from src.service.fleet.domain.entity.diagram_entity import BusDiagramModel, FloorSeats
from src.service.fleet.driven_adapter.model.template_orm import BusDiagramModelOrm


def _model_to_entity(orm: BusDiagramModelOrm) -> BusDiagramModel:
    return BusDiagramModel(
        id=orm.id,
        name=orm.name,
        description=orm.description,
        max_capacity=orm.max_capacity,
        num_floors=orm.num_floors,
        seats_per_floor=[FloorSeats.from_dict(floor) for floor in orm.seats_per_floor],
        total_seats=orm.total_seats,
        is_factory_default=orm.is_factory_default,
        active=orm.active,
        created_at=orm.created_at,
        updated_at=orm.updated_at,
    )


class BusDiagramModelCommandRepoImpl(IBusDiagramModelCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, bus_diagram_model: BusDiagramModel) -> BusDiagramModel:
        orm = BusDiagramModelOrm(
            name=bus_diagram_model.name,
            description=bus_diagram_model.description,
            max_capacity=bus_diagram_model.max_capacity,
            num_floors=bus_diagram_model.num_floors,
            seats_per_floor=[floor.to_dict() for floor in bus_diagram_model.seats_per_floor],
            total_seats=bus_diagram_model.total_seats,
            is_factory_default=bus_diagram_model.is_factory_default,
            active=bus_diagram_model.active,
        )
        self.session.add(orm)
        await self.session.flush()
        await self.session.refresh(orm)
        return _model_to_entity(orm)

    @Logger.io
    async def get_by_id(self, *, bus_diagram_model_id: int) -> Optional[BusDiagramModel]:
        result = await self.session.execute(
            select(BusDiagramModelOrm).where(BusDiagramModelOrm.id == bus_diagram_model_id)
        )
        orm = result.scalar_one_or_none()
        return _model_to_entity(orm) if orm else None


class BusDiagramModelQueryRepoImpl(IBusDiagramModelQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, bus_diagram_model_id: int) -> Optional[BusDiagramModel]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusDiagramModelOrm).where(BusDiagramModelOrm.id == bus_diagram_model_id)
            )
            orm = result.scalar_one_or_none()
            return _model_to_entity(orm) if orm else None
