from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

ONE = Decimal(1)


@dataclass(frozen=True)
class RateSet:
	"""Rates of one unit of ``base_code`` expressed in every other currency."""

	base_code: str
	rates: Mapping[str, Decimal] = field(default_factory=dict, hash=False)

	def __post_init__(self):
		# read-only view over a private copy
		object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

	@property
	def currencies(self) -> frozenset[str]:
		return frozenset(self.rates) | {self.base_code}

	def rate_for(self, code: str) -> Decimal | None:
		if code == self.base_code:
			return ONE
		return self.rates.get(code)

	def __contains__(self, code: object) -> bool:
		return code == self.base_code or code in self.rates

	def __len__(self) -> int:
		return len(self.currencies)


@dataclass(frozen=True)
class ConversionRequest:
	amount: Decimal
	source_code: str
	target_code: str


@dataclass(frozen=True)
class ConversionResult:
	source_code: str
	target_code: str
	amount: Decimal
	converted_amount: Decimal
	effective_rate: Decimal
	display_amount: str
	display_rate: str


class ConversionStatus(str, Enum):
	IDLE = 'idle'
	LOADING = 'loading'
	READY = 'ready'
	FAILED = 'failed'


@dataclass(frozen=True)
class ConversionState:
	status: ConversionStatus
	result: ConversionResult | None = None
	error: Exception | None = None
	message: str | None = None

	@classmethod
	def idle(cls) -> 'ConversionState':
		return cls(status=ConversionStatus.IDLE)

	@classmethod
	def loading(cls) -> 'ConversionState':
		return cls(status=ConversionStatus.LOADING)

	@classmethod
	def ready(cls, result: ConversionResult | None = None) -> 'ConversionState':
		return cls(status=ConversionStatus.READY, result=result)

	@classmethod
	def failed(cls, error: Exception, message: str | None = None) -> 'ConversionState':
		return cls(status=ConversionStatus.FAILED, error=error, message=message or str(error))

	@property
	def is_loading(self) -> bool:
		return self.status is ConversionStatus.LOADING
