from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_diagram_model_zone_repo import (
    IBusDiagramModelZoneCommandRepo,
    IBusDiagramModelZoneQueryRepo,
)
from src.service.fleet.domain.entity.zone_entity import BusDiagramModelZone
from src.service.fleet.driven_adapter.model.template_orm import BusDiagramModelZoneOrm


def _model_to_entity(orm: BusDiagramModelZoneOrm) -> BusDiagramModelZone:
    return BusDiagramModelZone(
        id=orm.id,
        bus_diagram_model_id=orm.bus_diagram_model_id,
        name=orm.name,
        row_numbers=list(orm.row_numbers),
        price_multiplier=orm.price_multiplier,
        created_at=orm.created_at,
        updated_at=orm.updated_at,
    )


class BusDiagramModelZoneCommandRepoImpl(IBusDiagramModelZoneCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, zone: BusDiagramModelZone) -> BusDiagramModelZone:
        orm = BusDiagramModelZoneOrm(
            bus_diagram_model_id=zone.bus_diagram_model_id,
            name=zone.name,
            row_numbers=list(zone.row_numbers),
            price_multiplier=zone.price_multiplier,
        )
        self.session.add(orm)
        await self.session.flush()
        await self.session.refresh(orm)
        return _model_to_entity(orm)


class BusDiagramModelZoneQueryRepoImpl(IBusDiagramModelZoneQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_by_bus_diagram_model_id(
        self, *, bus_diagram_model_id: int
    ) -> List[BusDiagramModelZone]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusDiagramModelZoneOrm)
                .where(BusDiagramModelZoneOrm.bus_diagram_model_id == bus_diagram_model_id)
                .order_by(BusDiagramModelZoneOrm.id)
            )
            return [_model_to_entity(orm) for orm in result.scalars().all()]
