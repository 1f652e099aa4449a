from typing import AsyncContextManager, Callable, List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_seat_repo import IBusSeatCommandRepo, IBusSeatQueryRepo
from src.service.fleet.domain.entity.seat_entity import BusSeat
from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType
from src.service.fleet.driven_adapter.model.seat_diagram_orm import BusSeatOrm


def _model_to_entity(orm: BusSeatOrm) -> BusSeat:
    return BusSeat(
        id=orm.id,
        seat_diagram_id=orm.seat_diagram_id,
        floor_number=orm.floor_number,
        position=dict(orm.position),
        seat_number=orm.seat_number,
        space_type=SpaceType(orm.space_type),
        seat_type=SeatType(orm.seat_type),
        amenities=list(orm.amenities or []),
        reclinement_angle=orm.reclinement_angle,
        meta=dict(orm.meta or {}),
        active=orm.active,
        created_at=orm.created_at,
        updated_at=orm.updated_at,
    )


class BusSeatCommandRepoImpl(IBusSeatCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io(truncate_content=True)
    async def create_many(self, *, seats: List[BusSeat]) -> List[BusSeat]:
        if not seats:
            return []

        rows = [
            {
                'seat_diagram_id': seat.seat_diagram_id,
                'floor_number': seat.floor_number,
                'position': dict(seat.position),
                'seat_number': seat.seat_number,
                'space_type': seat.space_type.value,
                'seat_type': seat.seat_type.value,
                'amenities': list(seat.amenities),
                'reclinement_angle': seat.reclinement_angle,
                'meta': dict(seat.meta),
                'active': seat.active,
            }
            for seat in seats
        ]
        result = await self.session.scalars(
            insert(BusSeatOrm).returning(BusSeatOrm, sort_by_parameter_order=True),
            rows,
        )
        return [_model_to_entity(orm) for orm in result.all()]


class BusSeatQueryRepoImpl(IBusSeatQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def list_by_seat_diagram_id(self, *, seat_diagram_id: int) -> List[BusSeat]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusSeatOrm)
                .where(BusSeatOrm.seat_diagram_id == seat_diagram_id)
                .order_by(BusSeatOrm.id)
            )
            return [_model_to_entity(orm) for orm in result.scalars().all()]
