from typing import AsyncContextManager, Callable, List

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_seat_model_repo import (
    IBusSeatModelCommandRepo,
    IBusSeatModelQueryRepo,
)
from src.service.fleet.domain.entity.seat_entity import BusSeatModel
from src.service.fleet.domain.enum.seat_enum import SeatType, SpaceType
from src.service.fleet.driven_adapter.model.template_orm import BusSeatModelOrm


def _model_to_entity(orm: BusSeatModelOrm) -> BusSeatModel:
    return BusSeatModel(
        id=orm.id,
        bus_diagram_model_id=orm.bus_diagram_model_id,
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


class BusSeatModelCommandRepoImpl(IBusSeatModelCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io(truncate_content=True)
    async def create_many(self, *, seat_models: List[BusSeatModel]) -> List[BusSeatModel]:
        if not seat_models:
            return []

        rows = [
            {
                'bus_diagram_model_id': seat_model.bus_diagram_model_id,
                'floor_number': seat_model.floor_number,
                'position': dict(seat_model.position),
                'seat_number': seat_model.seat_number,
                'space_type': seat_model.space_type.value,
                'seat_type': seat_model.seat_type.value,
                'amenities': list(seat_model.amenities),
                'reclinement_angle': seat_model.reclinement_angle,
                'meta': dict(seat_model.meta),
                'active': seat_model.active,
            }
            for seat_model in seat_models
        ]
        result = await self.session.scalars(
            insert(BusSeatModelOrm).returning(BusSeatModelOrm, sort_by_parameter_order=True),
            rows,
        )
        return [_model_to_entity(orm) for orm in result.all()]

    @Logger.io
    async def delete_by_bus_diagram_model_id(self, *, bus_diagram_model_id: int) -> int:
        result = await self.session.execute(
            delete(BusSeatModelOrm).where(
                BusSeatModelOrm.bus_diagram_model_id == bus_diagram_model_id
            )
        )
        return result.rowcount  # type: ignore[attr-defined]


class BusSeatModelQueryRepoImpl(IBusSeatModelQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def list_by_bus_diagram_model_id(
        self, *, bus_diagram_model_id: int
    ) -> List[BusSeatModel]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusSeatModelOrm)
                .where(BusSeatModelOrm.bus_diagram_model_id == bus_diagram_model_id)
                .order_by(BusSeatModelOrm.id)
            )
            return [_model_to_entity(orm) for orm in result.scalars().all()]
