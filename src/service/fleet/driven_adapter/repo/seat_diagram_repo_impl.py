from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_seat_diagram_repo import (
    ISeatDiagramCommandRepo,
    ISeatDiagramQueryRepo,
)
from src.service.fleet.domain.entity.diagram_entity import FloorSeats, SeatDiagram
from src.service.fleet.driven_adapter.model.seat_diagram_orm import SeatDiagramOrm


def _model_to_entity(orm: SeatDiagramOrm) -> SeatDiagram:
    return SeatDiagram(
        id=orm.id,
        bus_diagram_model_id=orm.bus_diagram_model_id,
        name=orm.name,
        max_capacity=orm.max_capacity,
        num_floors=orm.num_floors,
        seats_per_floor=[FloorSeats.from_dict(floor) for floor in orm.seats_per_floor],
        total_seats=orm.total_seats,
        is_factory_default=orm.is_factory_default,
        active=orm.active,
        created_at=orm.created_at,
        updated_at=orm.updated_at,
    )


class SeatDiagramCommandRepoImpl(ISeatDiagramCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        orm = SeatDiagramOrm(
            bus_diagram_model_id=seat_diagram.bus_diagram_model_id,
            name=seat_diagram.name,
            max_capacity=seat_diagram.max_capacity,
            num_floors=seat_diagram.num_floors,
            seats_per_floor=[floor.to_dict() for floor in seat_diagram.seats_per_floor],
            total_seats=seat_diagram.total_seats,
            is_factory_default=seat_diagram.is_factory_default,
            active=seat_diagram.active,
        )
        self.session.add(orm)
        await self.session.flush()
        await self.session.refresh(orm)
        return _model_to_entity(orm)

    @Logger.io
    async def delete(self, *, seat_diagram_id: int) -> None:
        result = await self.session.execute(
            delete(SeatDiagramOrm).where(SeatDiagramOrm.id == seat_diagram_id)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError('Seat diagram not found')


class SeatDiagramQueryRepoImpl(ISeatDiagramQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, seat_diagram_id: int) -> Optional[SeatDiagram]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatDiagramOrm).where(SeatDiagramOrm.id == seat_diagram_id)
            )
            orm = result.scalar_one_or_none()
            return _model_to_entity(orm) if orm else None
