# nosec B101


import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from domain.exceptions.currency import TransportError
from domain.models.currency import RateSet
from infrastructure.providers.base import ExchangeRateProvider
from infrastructure.providers.exchangerate_api import ExchangeRateAPIProvider
from infrastructure.repositories.rates import RateRepository


@pytest.fixture
def provider():
    mock_provider = AsyncMock(spec=ExchangeRateAPIProvider)
    mock_provider.name = 'mock'
    return mock_provider


def test_api_provider_satisfies_protocol():
    assert isinstance(ExchangeRateAPIProvider(client=AsyncMock()), ExchangeRateProvider)


@pytest.mark.asyncio
async def test_fetch_rates_delegates_to_provider(provider):
    expected = RateSet(base_code='EUR', rates={'USD': Decimal('1.1')})
    provider.fetch_rates.return_value = expected
    repository = RateRepository(provider)

    assert await repository.fetch_rates('EUR') is expected
    provider.fetch_rates.assert_awaited_once_with('EUR')


@pytest.mark.asyncio
async def test_every_call_hits_the_provider(provider):
    provider.fetch_rates.return_value = RateSet(base_code='EUR', rates={'USD': Decimal('1.1')})
    repository = RateRepository(provider)

    await repository.fetch_rates('EUR')
    await repository.fetch_rates('EUR')

    assert provider.fetch_rates.await_count == 2


@pytest.mark.asyncio
async def test_discover_currencies_uses_bootstrap_base(provider):
    provider.fetch_rates.return_value = RateSet(
        base_code='GBP', rates={'USD': Decimal('1.27'), 'EUR': Decimal('1.16')}
    )
    repository = RateRepository(provider, bootstrap_currency='GBP')

    rate_set = await repository.discover_currencies()

    provider.fetch_rates.assert_awaited_once_with('GBP')
    assert rate_set.currencies == frozenset({'GBP', 'USD', 'EUR'})


@pytest.mark.asyncio
async def test_provider_errors_propagate(provider):
    provider.fetch_rates.side_effect = TransportError(503)
    repository = RateRepository(provider)

    with pytest.raises(TransportError):
        await repository.discover_currencies()


@pytest.mark.asyncio
async def test_close_closes_provider(provider):
    repository = RateRepository(provider)

    await repository.close()

    provider.close.assert_awaited_once()
