from decimal import Decimal, InvalidOperation

from domain.exceptions.currency import RateUnavailableError, StaleRatesError, ValidationError
from domain.models.currency import ONE, ConversionRequest, ConversionResult, RateSet
from domain.services.formatting import format_display, format_rate_line

INVALID_AMOUNT_MESSAGE = 'Please enter a valid amount greater than zero.'


def parse_amount(value: object) -> Decimal:
	"""Coerce user input to a positive finite Decimal or raise ValidationError."""
	if value is None or isinstance(value, bool):
		raise ValidationError(INVALID_AMOUNT_MESSAGE)

	try:
		amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
	except (InvalidOperation, ValueError) as e:
		raise ValidationError(INVALID_AMOUNT_MESSAGE) from e

	if not amount.is_finite() or amount <= 0:
		raise ValidationError(INVALID_AMOUNT_MESSAGE)
	return amount


def compute_conversion(request: ConversionRequest, rates: RateSet | None) -> ConversionResult:
	amount = parse_amount(request.amount)
	source, target = request.source_code, request.target_code

	if source == target:
		rate = ONE
	else:
		if rates is None:
			raise RateUnavailableError(target, source)
		if rates.base_code != source:
			raise StaleRatesError(source, rates.base_code, target)
		rate = rates.rate_for(target)
		if rate is None:
			raise RateUnavailableError(target, rates.base_code)

	converted = amount if rate is ONE else amount * rate

	return ConversionResult(
		source_code=source,
		target_code=target,
		amount=amount,
		converted_amount=converted,
		effective_rate=rate,
		display_amount=format_display(converted, target),
		display_rate=format_rate_line(source, target, rate),
	)
