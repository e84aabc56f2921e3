import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	CurrencyException,
	RateUnavailableError,
	ValidationError,
)
from domain.models.currency import ConversionState

logger = logging.getLogger(__name__)


class ConversionFailedError(Exception):
	"""Raised by routes when the controller ends a cycle in the FAILED state."""

	def __init__(self, state: ConversionState):
		self.state = state
		super().__init__(state.message)


def status_code_for(error: Exception | None) -> int:
	if isinstance(error, ValidationError):
		return status.HTTP_400_BAD_REQUEST
	if isinstance(error, RateUnavailableError):
		return status.HTTP_404_NOT_FOUND
	if isinstance(error, CurrencyException):
		# network, transport, data and not-ready errors
		return status.HTTP_503_SERVICE_UNAVAILABLE
	return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ConversionFailedError)
	async def conversion_failed_handler(request: Request, exc: ConversionFailedError):
		error = exc.state.error
		return JSONResponse(
			status_code=status_code_for(error),
			content={
				'detail': exc.state.message,
				'error': type(error).__name__ if error else None,
			},
		)

	@app.exception_handler(CurrencyException)
	async def currency_error_handler(request: Request, exc: CurrencyException):
		logger.error(f'Currency error: {exc}')
		return JSONResponse(status_code=status_code_for(exc), content={'detail': str(exc)})
