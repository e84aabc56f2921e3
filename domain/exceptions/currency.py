class CurrencyException(Exception):
	pass


class NetworkError(CurrencyException):
	"""Connectivity failure (DNS, refused or reset connection, timeout)."""


class TransportError(CurrencyException):
	def __init__(self, status_code: int, message: str | None = None):
		self.status_code = status_code
		super().__init__(message or f'HTTP error! status: {status_code}')


class DataError(CurrencyException):
	def __init__(self, message: str = 'Invalid API response structure'):
		super().__init__(message)


class ValidationError(CurrencyException):
	pass


class RateUnavailableError(CurrencyException):
	def __init__(self, target_code: str, base_code: str, message: str | None = None):
		self.target_code = target_code
		self.base_code = base_code
		super().__init__(
			message
			or f'Exchange rate for {target_code} not available when using {base_code} as base.'
		)


class StaleRatesError(RateUnavailableError):
	def __init__(self, source_code: str, base_code: str, target_code: str):
		self.source_code = source_code
		super().__init__(
			target_code,
			base_code,
			f'Rates are based on {base_code}, cannot convert from {source_code} to {target_code}.',
		)


class NotReadyError(CurrencyException):
	def __init__(self, message: str = 'Currency list has not been loaded yet.'):
		super().__init__(message)
