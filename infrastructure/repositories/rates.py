import logging

from domain.models.currency import RateSet
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateRepository:
	"""Fetches rate snapshots from a provider. Holds no state between calls."""

	def __init__(self, provider: ExchangeRateProvider, bootstrap_currency: str = 'USD'):
		self.provider = provider
		self.bootstrap_currency = bootstrap_currency

	async def fetch_rates(self, base_code: str) -> RateSet:
		logger.debug(f'Fetching rates for base {base_code} from {self.provider.name}')
		return await self.provider.fetch_rates(base_code)

	async def discover_currencies(self) -> RateSet:
		"""Bootstrap fetch; the returned set's ``currencies`` is the supported universe."""
		rate_set = await self.fetch_rates(self.bootstrap_currency)
		logger.info(
			f'{self.provider.name} supports {len(rate_set.currencies)} currencies '
			f'(discovered via {self.bootstrap_currency})'
		)
		return rate_set

	async def close(self) -> None:
		await self.provider.close()
