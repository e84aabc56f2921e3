from decimal import Decimal

from pydantic import BaseModel, Field

from domain.models.currency import ConversionResult, ConversionState, ConversionStatus


class ConversionResultResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount')
	exchange_rate: Decimal = Field(..., description='Rate of one source unit in the target currency')
	display_amount: str = Field(..., description='Formatted converted amount')
	display_rate: str = Field(..., description='Formatted rate line, e.g. "1 USD = 83.0000 INR"')

	@classmethod
	def from_result(cls, result: ConversionResult) -> 'ConversionResultResponse':
		return cls(
			from_currency=result.source_code,
			to_currency=result.target_code,
			amount=result.amount,
			converted_amount=result.converted_amount,
			exchange_rate=result.effective_rate,
			display_amount=result.display_amount,
			display_rate=result.display_rate,
		)

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'from_currency': 'USD',
				'to_currency': 'INR',
				'amount': 10,
				'converted_amount': 830.0,
				'exchange_rate': 83.0,
				'display_amount': '₹830.00',
				'display_rate': '1 USD = 83.0000 INR',
			}
		}


class ConversionStateResponse(BaseModel):
	status: ConversionStatus = Field(..., description='idle, loading, ready or failed')
	source_currency: str | None = None
	target_currency: str | None = None
	rates_base: str | None = Field(None, description='Base currency of the rates currently held')
	result: ConversionResultResponse | None = None
	error: str | None = Field(None, description='User-facing error message')

	@classmethod
	def build(
		cls,
		state: ConversionState,
		source_currency: str | None,
		target_currency: str | None,
		rates_base: str | None,
	) -> 'ConversionStateResponse':
		return cls(
			status=state.status,
			source_currency=source_currency,
			target_currency=target_currency,
			rates_base=rates_base,
			result=ConversionResultResponse.from_result(state.result) if state.result else None,
			error=state.message,
		)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	class ConfigDict:
		json_schema_extra = {'examples': [{'currencies': ['EUR', 'INR', 'USD']}]}


class HealthResponse(BaseModel):
	status: str
	ready: bool
