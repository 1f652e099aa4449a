"""
Unit of Work Pattern - one database transaction shared by every command repository

Architecture:
- UoW owns the session lifecycle (open on enter, rollback and close on exit)
- UoW owns commit; nothing is persisted unless the caller commits
- Command repositories are built on the UoW's session, so all their writes
  land in the same transaction
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


if TYPE_CHECKING:
    from src.service.fleet.app.interface import (
        IBusCommandRepo,
        IBusDiagramModelCommandRepo,
        IBusDiagramModelZoneCommandRepo,
        IBusModelCommandRepo,
        IBusSeatCommandRepo,
        IBusSeatModelCommandRepo,
        ISeatDiagramCommandRepo,
        ISeatDiagramZoneCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Fleet Service

    Usage:
        async with uow:
            seat_diagram = await uow.seat_diagram_command_repo.create(...)
            bus = await uow.bus_command_repo.create(...)
            await uow.commit()
    """

    # Templates
    bus_model_command_repo: IBusModelCommandRepo
    bus_diagram_model_command_repo: IBusDiagramModelCommandRepo
    bus_diagram_model_zone_command_repo: IBusDiagramModelZoneCommandRepo
    bus_seat_model_command_repo: IBusSeatModelCommandRepo

    # Bus-owned instances
    seat_diagram_command_repo: ISeatDiagramCommandRepo
    seat_diagram_zone_command_repo: ISeatDiagramZoneCommandRepo
    bus_seat_command_repo: IBusSeatCommandRepo
    bus_command_repo: IBusCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh session is opened per `async with` block; rollback on exit is a no-op
    after a successful commit.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.fleet.driven_adapter.repo.bus_diagram_model_repo_impl import (
            BusDiagramModelCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.bus_diagram_model_zone_repo_impl import (
            BusDiagramModelZoneCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.bus_model_repo_impl import (
            BusModelCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.bus_repo_impl import BusCommandRepoImpl
        from src.service.fleet.driven_adapter.repo.bus_seat_model_repo_impl import (
            BusSeatModelCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.bus_seat_repo_impl import (
            BusSeatCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.seat_diagram_repo_impl import (
            SeatDiagramCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.seat_diagram_zone_repo_impl import (
            SeatDiagramZoneCommandRepoImpl,
        )

        self.session = self.session_factory()

        # Create repositories with shared session
        self.bus_model_command_repo = BusModelCommandRepoImpl(session=self.session)
        self.bus_diagram_model_command_repo = BusDiagramModelCommandRepoImpl(session=self.session)
        self.bus_diagram_model_zone_command_repo = BusDiagramModelZoneCommandRepoImpl(
            session=self.session
        )
        self.bus_seat_model_command_repo = BusSeatModelCommandRepoImpl(session=self.session)
        self.seat_diagram_command_repo = SeatDiagramCommandRepoImpl(session=self.session)
        self.seat_diagram_zone_command_repo = SeatDiagramZoneCommandRepoImpl(session=self.session)
        self.bus_seat_command_repo = BusSeatCommandRepoImpl(session=self.session)
        self.bus_command_repo = BusCommandRepoImpl(session=self.session)

        return await super().__aenter__()  # type: ignore[return-value]

    async def __aexit__(self, *args):
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self):
        assert self.session is not None, 'Unit of work used outside `async with`'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
