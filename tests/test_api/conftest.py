import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_controller
from api.main import app
from application.services import ConversionController
from domain.models.currency import RateSet
from infrastructure.repositories.rates import RateRepository


def rate_set(base: str, rates: dict[str, float]) -> RateSet:
    return RateSet(base_code=base, rates={code: Decimal(str(value)) for code, value in rates.items()})


RATE_TABLE = {
    'USD': rate_set('USD', {'EUR': 0.9, 'INR': 83.0, 'USD': 1.0}),
    'INR': rate_set('INR', {'USD': 0.012, 'EUR': 0.0108}),
    'EUR': rate_set('EUR', {'USD': 1.1, 'INR': 91.0}),
}


@pytest.fixture
def mock_repository():
    repo = AsyncMock(spec=RateRepository)
    repo.discover_currencies.return_value = RATE_TABLE['USD']
    repo.fetch_rates.side_effect = lambda base: RATE_TABLE[base]
    return repo


@pytest.fixture
def controller(mock_repository):
    return ConversionController(mock_repository)


@pytest.fixture
def ready_controller(controller):
    asyncio.run(controller.initialize())
    return controller


@pytest.fixture
def make_client():
    def _make(controller: ConversionController) -> TestClient:
        # Override the real dependency; lifespan is not run without a context manager
        app.dependency_overrides[get_controller] = lambda: controller
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, ready_controller):
    return make_client(ready_controller)
