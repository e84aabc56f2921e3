from typing import Protocol, runtime_checkable

from domain.models.currency import RateSet


@runtime_checkable
class ExchangeRateProvider(Protocol):
	"""A remote source of exchange rates keyed by base currency."""

	@property
	def name(self) -> str: ...

	async def fetch_rates(self, base_code: str) -> RateSet:
		"""Return every rate quoted against ``base_code``.

		Raises NetworkError, TransportError or DataError.
		"""
		...

	async def close(self) -> None: ...
