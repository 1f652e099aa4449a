from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_model_repo import (
    IBusModelCommandRepo,
    IBusModelQueryRepo,
)
from src.service.fleet.domain.entity.bus_model_entity import BusModel
from src.service.fleet.driven_adapter.model.template_orm import BusModelOrm


def _model_to_entity(bus_model: BusModelOrm) -> BusModel:
    return BusModel(
        id=bus_model.id,
        manufacturer=bus_model.manufacturer,
        model=bus_model.model,
        year=bus_model.year,
        seating_capacity=bus_model.seating_capacity,
        num_floors=bus_model.num_floors,
        engine_type=bus_model.engine_type,
        distribution_type=bus_model.distribution_type,
        amenities=list(bus_model.amenities or []),
        default_bus_diagram_model_id=bus_model.default_bus_diagram_model_id,
        active=bus_model.active,
        created_at=bus_model.created_at,
        updated_at=bus_model.updated_at,
    )


class BusModelCommandRepoImpl(IBusModelCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, bus_model: BusModel) -> BusModel:
        orm = BusModelOrm(
            manufacturer=bus_model.manufacturer,
            model=bus_model.model,
            year=bus_model.year,
            seating_capacity=bus_model.seating_capacity,
            num_floors=bus_model.num_floors,
            engine_type=bus_model.engine_type,
            distribution_type=bus_model.distribution_type,
            amenities=list(bus_model.amenities),
            default_bus_diagram_model_id=bus_model.default_bus_diagram_model_id,
            active=bus_model.active,
        )
        self.session.add(orm)
        await self.session.flush()
        await self.session.refresh(orm)
        return _model_to_entity(orm)


class BusModelQueryRepoImpl(IBusModelQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, bus_model_id: int) -> Optional[BusModel]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusModelOrm).where(BusModelOrm.id == bus_model_id)
            )
            orm = result.scalar_one_or_none()
            return _model_to_entity(orm) if orm else None

    @Logger.io
    async def get_by_identity(
        self, *, manufacturer: str, model: str, year: int
    ) -> Optional[BusModel]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusModelOrm).where(
                    BusModelOrm.manufacturer == manufacturer,
                    BusModelOrm.model == model,
                    BusModelOrm.year == year,
                )
            )
            orm = result.scalar_one_or_none()
            return _model_to_entity(orm) if orm else None

    @Logger.io
    async def list_all(self) -> List[BusModel]:
        async with self.session_factory() as session:
            result = await session.execute(select(BusModelOrm).order_by(BusModelOrm.id))
            return [_model_to_entity(orm) for orm in result.scalars().all()]
