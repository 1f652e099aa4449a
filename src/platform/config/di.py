"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.fleet.app.seat_diagram_provisioner import SeatDiagramProvisioner
from src.service.fleet.driven_adapter.repo.bus_diagram_model_repo_impl import (
    BusDiagramModelQueryRepoImpl,
)
from src.service.fleet.driven_adapter.repo.bus_diagram_model_zone_repo_impl import (
    BusDiagramModelZoneQueryRepoImpl,
)
from src.service.fleet.driven_adapter.repo.bus_model_repo_impl import BusModelQueryRepoImpl
from src.service.fleet.driven_adapter.repo.bus_repo_impl import BusQueryRepoImpl
from src.service.fleet.driven_adapter.repo.bus_seat_model_repo_impl import (
    BusSeatModelQueryRepoImpl,
)
from src.service.fleet.driven_adapter.repo.bus_seat_repo_impl import BusSeatQueryRepoImpl
from src.service.fleet.driven_adapter.repo.seat_diagram_repo_impl import SeatDiagramQueryRepoImpl
from src.service.fleet.driven_adapter.repo.seat_diagram_zone_repo_impl import (
    SeatDiagramZoneQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (one engine per process; URL from settings unless overridden)
    database = providers.Singleton(Database)

    # Unit of Work (new instance per use, each opens its own transaction)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session_factory
    )

    # Query repositories (stateless - use session_factory per call)
    bus_query_repo = providers.Singleton(
        BusQueryRepoImpl, session_factory=database.provided.session
    )
    bus_model_query_repo = providers.Singleton(
        BusModelQueryRepoImpl, session_factory=database.provided.session
    )
    bus_diagram_model_query_repo = providers.Singleton(
        BusDiagramModelQueryRepoImpl, session_factory=database.provided.session
    )
    bus_diagram_model_zone_query_repo = providers.Singleton(
        BusDiagramModelZoneQueryRepoImpl, session_factory=database.provided.session
    )
    bus_seat_model_query_repo = providers.Singleton(
        BusSeatModelQueryRepoImpl, session_factory=database.provided.session
    )
    seat_diagram_query_repo = providers.Singleton(
        SeatDiagramQueryRepoImpl, session_factory=database.provided.session
    )
    seat_diagram_zone_query_repo = providers.Singleton(
        SeatDiagramZoneQueryRepoImpl, session_factory=database.provided.session
    )
    bus_seat_query_repo = providers.Singleton(
        BusSeatQueryRepoImpl, session_factory=database.provided.session
    )

    # Seat diagram provisioning (template reads + transactional clone/swap)
    seat_diagram_provisioner = providers.Singleton(
        SeatDiagramProvisioner,
        bus_model_query_repo=bus_model_query_repo,
        bus_diagram_model_query_repo=bus_diagram_model_query_repo,
        bus_diagram_model_zone_query_repo=bus_diagram_model_zone_query_repo,
        bus_seat_model_query_repo=bus_seat_model_query_repo,
        uow_factory=unit_of_work.provider,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.database()


async def cleanup() -> None:
    await container.database().dispose()
    container.reset_singletons()
