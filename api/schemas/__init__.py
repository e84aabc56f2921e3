from .requests import ConversionRequest, SourceCurrencyRequest
from .responses import (
	ConversionResultResponse,
	ConversionStateResponse,
	HealthResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResultResponse',
	'ConversionStateResponse',
	'HealthResponse',
	'SourceCurrencyRequest',
	'SupportedCurrenciesResponse',
]
