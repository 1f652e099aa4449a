"""
Test Configuration and Fixtures

- Unit tests (test/**/unit/): pure domain logic or use cases with AsyncMock repos
- Integration tests (test/**/integration/): real SQLAlchemy session on an SQLite file
  (foreign keys on), schema created and dropped around every test
"""

# =============================================================================
# Environment setup MUST happen before any application import:
# Settings and the loguru file sink read it at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    db_file = Path(tempfile.gettempdir()) / f'fleet_test_{os.getpid()}.sqlite3'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_file}'
    os.environ.setdefault('DEBUG', 'false')


_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from datetime import date  # noqa: E402
from typing import Any  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import cleanup, container  # noqa: E402
from src.platform.database.db_setting import Database  # noqa: E402
from src.platform.database.unit_of_work import AbstractUnitOfWork  # noqa: E402


# =============================================================================
# Database
# =============================================================================
@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    container.reset_singletons()
    db = container.database()
    await db.drop_tables()
    await db.create_tables()
    yield db
    await db.drop_tables()
    await cleanup()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], AbstractUnitOfWork]:
    return container.unit_of_work


@pytest.fixture
def seat_diagram_provisioner(database: Database):
    return container.seat_diagram_provisioner()


# =============================================================================
# HTTP client
# =============================================================================
@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    from src.platform.config.wire_modules import WIRE_MODULES
    from src.service.fleet.main import app

    container.wire(modules=WIRE_MODULES)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as http_client:
        yield http_client
    container.unwire()


# =============================================================================
# Payload builders
# =============================================================================
@pytest.fixture
def bus_payload() -> Callable[..., dict[str, Any]]:
    def _build(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            'economic_number': 'ECO-1001',
            'registration_number': 'REG-0001',
            'license_plate_type': 'NATIONAL',
            'license_plate_number': 'PLT-0001',
            'model_id': 1,
            'serial_number': 'SN-0001',
            'chassis_number': 'CH-0001',
            'purchase_date': date(2024, 1, 15),
            'expiration_date': date(2034, 1, 15),
            'gross_vehicle_weight': 18000.0,
        }
        payload.update(overrides)
        return payload

    return _build
