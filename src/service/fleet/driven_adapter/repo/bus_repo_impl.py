from typing import Any, AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_repo import IBusCommandRepo, IBusQueryRepo
from src.service.fleet.domain.bus_status_domain import bus_status_machine
from src.service.fleet.domain.entity.bus_entity import Bus
from src.service.fleet.domain.enum.bus_status import BusStatus
from src.service.fleet.domain.enum.license_plate_type import LicensePlateType
from src.service.fleet.driven_adapter.model.bus_orm import BusOrm


_WRITABLE_COLUMNS = frozenset(BusOrm.__table__.columns.keys()) - {'id', 'created_at', 'updated_at'}


def _model_to_entity(bus_model: BusOrm) -> Bus:
    return Bus(
        id=bus_model.id,
        economic_number=bus_model.economic_number,
        registration_number=bus_model.registration_number,
        license_plate_type=LicensePlateType(bus_model.license_plate_type),
        license_plate_number=bus_model.license_plate_number,
        circulation_card=bus_model.circulation_card,
        available_for_tourism_only=bus_model.available_for_tourism_only,
        status=BusStatus(bus_model.status),
        purchase_date=bus_model.purchase_date,
        expiration_date=bus_model.expiration_date,
        erp_client_number=bus_model.erp_client_number,
        model_id=bus_model.model_id,
        vehicle_id=bus_model.vehicle_id,
        serial_number=bus_model.serial_number,
        engine_number=bus_model.engine_number,
        chassis_number=bus_model.chassis_number,
        gross_vehicle_weight=bus_model.gross_vehicle_weight,
        sct_permit=bus_model.sct_permit,
        current_kilometer=bus_model.current_kilometer,
        gps_id=bus_model.gps_id,
        last_maintenance_date=bus_model.last_maintenance_date,
        next_maintenance_date=bus_model.next_maintenance_date,
        seat_diagram_id=bus_model.seat_diagram_id,
        active=bus_model.active,
        created_at=bus_model.created_at,
        updated_at=bus_model.updated_at,
    )


class BusCommandRepoImpl(IBusCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    async def _get_model(self, bus_id: int, *, for_update: bool = False) -> Optional[BusOrm]:
        stmt = select(BusOrm).where(BusOrm.id == bus_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @Logger.io
    async def get_by_id(self, *, bus_id: int, for_update: bool = False) -> Optional[Bus]:
        bus_model = await self._get_model(bus_id, for_update=for_update)
        return _model_to_entity(bus_model) if bus_model else None

    @Logger.io
    async def create(self, *, bus: Bus) -> Bus:
        if bus.seat_diagram_id is None:
            raise ValueError('A bus cannot be persisted without a seat diagram')

        bus_model = BusOrm(
            economic_number=bus.economic_number,
            registration_number=bus.registration_number,
            license_plate_type=bus.license_plate_type.value,
            license_plate_number=bus.license_plate_number,
            circulation_card=bus.circulation_card,
            available_for_tourism_only=bus.available_for_tourism_only,
            status=bus.status.value,
            purchase_date=bus.purchase_date,
            expiration_date=bus.expiration_date,
            erp_client_number=bus.erp_client_number,
            model_id=bus.model_id,
            vehicle_id=bus.vehicle_id,
            serial_number=bus.serial_number,
            engine_number=bus.engine_number,
            chassis_number=bus.chassis_number,
            gross_vehicle_weight=bus.gross_vehicle_weight,
            sct_permit=bus.sct_permit,
            current_kilometer=bus.current_kilometer,
            gps_id=bus.gps_id,
            last_maintenance_date=bus.last_maintenance_date,
            next_maintenance_date=bus.next_maintenance_date,
            seat_diagram_id=bus.seat_diagram_id,
            active=bus.active,
        )
        self.session.add(bus_model)
        await self.session.flush()
        await self.session.refresh(bus_model)

        return _model_to_entity(bus_model)

    @Logger.io
    async def update(self, *, bus_id: int, changes: dict[str, Any]) -> Bus:
        bus_model = await self._get_model(bus_id, for_update=True)
        if not bus_model:
            raise NotFoundError('Bus not found')

        # Status guard runs against the persisted row, before any column is touched
        if (new_status := changes.get('status')) is not None:
            bus_status_machine.validate_transition(
                BusStatus(bus_model.status), BusStatus(new_status)
            )

        if unknown := changes.keys() - _WRITABLE_COLUMNS:
            raise ValueError(f'Unknown bus fields: {", ".join(sorted(unknown))}')

        for field, value in changes.items():
            # Enum members are stored by value
            setattr(bus_model, field, getattr(value, 'value', value))

        await self.session.flush()
        await self.session.refresh(bus_model)

        return _model_to_entity(bus_model)

    @Logger.io
    async def delete(self, *, bus_id: int) -> None:
        result = await self.session.execute(delete(BusOrm).where(BusOrm.id == bus_id))
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise NotFoundError('Bus not found')


class BusQueryRepoImpl(IBusQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, bus_id: int) -> Optional[Bus]:
        async with self.session_factory() as session:
            result = await session.execute(select(BusOrm).where(BusOrm.id == bus_id))
            bus_model = result.scalar_one_or_none()

            if not bus_model:
                return None

            return _model_to_entity(bus_model)

    @Logger.io
    async def list_all(self) -> List[Bus]:
        async with self.session_factory() as session:
            result = await session.execute(select(BusOrm).order_by(BusOrm.id))
            return [_model_to_entity(bus_model) for bus_model in result.scalars().all()]

    @Logger.io
    async def get_by_registration_number(self, *, registration_number: str) -> Optional[Bus]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusOrm).where(BusOrm.registration_number == registration_number)
            )
            bus_model = result.scalar_one_or_none()
            return _model_to_entity(bus_model) if bus_model else None

    @Logger.io
    async def get_by_license_plate_number(self, *, license_plate_number: str) -> Optional[Bus]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BusOrm).where(BusOrm.license_plate_number == license_plate_number)
            )
            bus_model = result.scalar_one_or_none()
            return _model_to_entity(bus_model) if bus_model else None
