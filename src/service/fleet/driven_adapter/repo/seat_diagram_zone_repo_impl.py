from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_seat_diagram_zone_repo import (
    ISeatDiagramZoneCommandRepo,
    ISeatDiagramZoneQueryRepo,
)
from src.service.fleet.domain.entity.zone_entity import SeatDiagramZone
from src.service.fleet.driven_adapter.model.seat_diagram_orm import SeatDiagramZoneOrm


def _model_to_entity(orm: SeatDiagramZoneOrm) -> SeatDiagramZone:
    return SeatDiagramZone(
        id=orm.id,
        seat_diagram_id=orm.seat_diagram_id,
        name=orm.name,
        row_numbers=list(orm.row_numbers),
        price_multiplier=orm.price_multiplier,
        created_at=orm.created_at,
        updated_at=orm.updated_at,
    )


class SeatDiagramZoneCommandRepoImpl(ISeatDiagramZoneCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, zone: SeatDiagramZone) -> SeatDiagramZone:
        orm = SeatDiagramZoneOrm(
            seat_diagram_id=zone.seat_diagram_id,
            name=zone.name,
            row_numbers=list(zone.row_numbers),
            price_multiplier=zone.price_multiplier,
        )
        self.session.add(orm)
        await self.session.flush()
        await self.session.refresh(orm)
        return _model_to_entity(orm)

    @Logger.io
    async def get_by_id(self, *, zone_id: int) -> Optional[SeatDiagramZone]:
        result = await self.session.execute(
            select(SeatDiagramZoneOrm).where(SeatDiagramZoneOrm.id == zone_id)
        )
        orm = result.scalar_one_or_none()
        return _model_to_entity(orm) if orm else None

    @Logger.io
    async def update(self, *, zone: SeatDiagramZone) -> SeatDiagramZone:
        result = await self.session.execute(
            select(SeatDiagramZoneOrm).where(SeatDiagramZoneOrm.id == zone.id)
        )
        orm = result.scalar_one_or_none()
        if not orm:
            raise NotFoundError('Seat diagram zone not found')

        orm.name = zone.name
        orm.row_numbers = list(zone.row_numbers)
        orm.price_multiplier = zone.price_multiplier
        await self.session.flush()
        await self.session.refresh(orm)
        return _model_to_entity(orm)

    @Logger.io
    async def delete_by_seat_diagram_id(self, *, seat_diagram_id: int) -> int:
        result = await self.session.execute(
            delete(SeatDiagramZoneOrm).where(SeatDiagramZoneOrm.seat_diagram_id == seat_diagram_id)
        )
        return result.rowcount  # type: ignore[attr-defined]


class SeatDiagramZoneQueryRepoImpl(ISeatDiagramZoneQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_by_seat_diagram_id(self, *, seat_diagram_id: int) -> List[SeatDiagramZone]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatDiagramZoneOrm)
                .where(SeatDiagramZoneOrm.seat_diagram_id == seat_diagram_id)
                .order_by(SeatDiagramZoneOrm.id)
            )
            return [_model_to_entity(orm) for orm in result.scalars().all()]
