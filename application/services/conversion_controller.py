import logging
from collections.abc import Callable
from decimal import Decimal

from domain.exceptions.currency import (
	CurrencyException,
	NotReadyError,
	RateUnavailableError,
	ValidationError,
)
from domain.models.currency import ConversionRequest, ConversionResult, ConversionState, RateSet
from domain.services.conversion import compute_conversion, parse_amount
from infrastructure.repositories.rates import RateRepository

logger = logging.getLogger(__name__)

StateSubscriber = Callable[[ConversionState], None]


class ConversionController:
	"""Owns the converter's selection, amount and rates for one user session.

	Every state change is pushed to subscribers as a ``ConversionState``.
	Fetch errors end up in a FAILED state and never escape the public
	operations. Each fetch is numbered; only the most recently issued one may
	modify state, so out-of-order responses are dropped.
	"""

	def __init__(
		self,
		repository: RateRepository,
		default_source: str = 'USD',
		default_target: str = 'INR',
		amount: Decimal | float | int | str = Decimal(1),
	):
		self.repository = repository
		self.default_source = default_source
		self.default_target = default_target

		self.currencies: frozenset[str] = frozenset()
		self.rates: RateSet | None = None
		self.source_code: str | None = None
		self.target_code: str | None = None
		self.amount = amount
		self.result: ConversionResult | None = None
		self.state = ConversionState.idle()

		self._ready = False
		self._disposed = False
		self._fetch_seq = 0
		self._subscribers: list[StateSubscriber] = []

	async def __aenter__(self) -> 'ConversionController':
		await self.initialize()
		return self

	async def __aexit__(self, *exc_info) -> None:
		await self.dispose()

	@property
	def is_ready(self) -> bool:
		return self._ready

	@property
	def sorted_currencies(self) -> list[str]:
		return sorted(self.currencies)

	def subscribe(self, callback: StateSubscriber) -> Callable[[], None]:
		self._subscribers.append(callback)

		def unsubscribe() -> None:
			if callback in self._subscribers:
				self._subscribers.remove(callback)

		return unsubscribe

	async def initialize(self) -> ConversionState:
		self._check_not_disposed()
		seq = self._begin_fetch()

		try:
			rate_set = await self.repository.discover_currencies()
		except CurrencyException as e:
			if self._is_superseded(seq):
				return self.state
			return self._fail(e, f'Failed to load currency codes: {e}')

		if self._is_superseded(seq):
			return self.state

		self.currencies = rate_set.currencies
		self.rates = rate_set
		if self.default_source in self.currencies and self.default_target in self.currencies:
			self.source_code = self.default_source
			self.target_code = self.default_target
		self._ready = True
		logger.info(f'Converter ready with {len(self.currencies)} currencies')
		return self._transition(ConversionState.ready(self.result))

	def select_source(self, code: str) -> None:
		"""Change the source selection without fetching; ``convert()`` refreshes rates.

		Ignored while a fetch is in flight.
		"""
		self._check_not_disposed()
		if not self.state.is_loading:
			self.source_code = code

	def set_target_code(self, code: str) -> None:
		self._check_not_disposed()
		self.target_code = code

	def set_amount(self, amount: Decimal | float | int | str) -> None:
		self._check_not_disposed()
		self.amount = amount

	async def set_source_code(self, code: str) -> ConversionState:
		self._check_not_disposed()
		if not self._ready:
			return self._fail(NotReadyError())

		self.source_code = code
		if self.rates is not None and self.rates.base_code == code:
			# drop any in-flight fetch for a base the user already left
			self._fetch_seq += 1
			return self._convert_now()
		return await self._refresh_rates(code)

	async def swap(self) -> ConversionState:
		self._check_not_disposed()
		if not self._ready:
			return self._fail(NotReadyError())

		if not self.source_code or not self.target_code:
			return self._fail(ValidationError('Please select a source and a target currency.'))
		self.source_code, self.target_code = self.target_code, self.source_code
		return await self._refresh_rates(self.source_code)

	async def convert(self) -> ConversionState:
		self._check_not_disposed()
		if self.state.is_loading:
			return self.state
		if not self._ready:
			return self._fail(NotReadyError())

		try:
			request = self._build_request()
		except ValidationError as e:
			return self._fail(e)

		if request.source_code != request.target_code and (
			self.rates is None or self.rates.base_code != request.source_code
		):
			return await self._refresh_rates(request.source_code)
		return self._convert_now()

	async def dispose(self) -> None:
		if self._disposed:
			return
		self._disposed = True
		self._ready = False
		self._fetch_seq += 1
		self._subscribers.clear()
		self.state = ConversionState.idle()
		await self.repository.close()
		logger.info('Converter disposed')

	async def _refresh_rates(self, base_code: str) -> ConversionState:
		seq = self._begin_fetch()

		try:
			rate_set = await self.repository.fetch_rates(base_code)
		except CurrencyException as e:
			if self._is_superseded(seq):
				logger.debug(f'Ignoring failed fetch #{seq} for {base_code}: superseded')
				return self.state
			return self._fail(e, f'Failed to fetch rates for {base_code}: {e}')

		if self._is_superseded(seq):
			logger.debug(f'Ignoring rates from fetch #{seq} for {base_code}: superseded')
			return self.state

		self.rates = rate_set
		return self._convert_now()

	def _convert_now(self) -> ConversionState:
		try:
			result = compute_conversion(self._build_request(), self.rates)
		except (ValidationError, RateUnavailableError) as e:
			return self._fail(e)

		self.result = result
		return self._transition(ConversionState.ready(result))

	def _build_request(self) -> ConversionRequest:
		if not self.source_code or not self.target_code:
			raise ValidationError('Please select a source and a target currency.')
		return ConversionRequest(
			amount=parse_amount(self.amount),
			source_code=self.source_code,
			target_code=self.target_code,
		)

	def _begin_fetch(self) -> int:
		self._fetch_seq += 1
		self._transition(ConversionState.loading())
		return self._fetch_seq

	def _is_superseded(self, seq: int) -> bool:
		return self._disposed or seq != self._fetch_seq

	def _fail(self, error: CurrencyException, message: str | None = None) -> ConversionState:
		logger.warning(f'Conversion failed: {message or error}')
		return self._transition(ConversionState.failed(error, message))

	def _transition(self, state: ConversionState) -> ConversionState:
		self.state = state
		for subscriber in list(self._subscribers):
			try:
				subscriber(state)
			except Exception:
				logger.exception('State subscriber raised')
		return state

	def _check_not_disposed(self) -> None:
		if self._disposed:
			raise RuntimeError('ConversionController has been disposed')
