from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=5)
	to_currency: str = Field(..., min_length=3, max_length=5)
	# validated by the converter so bad input gets the same 400 message
	amount: Decimal | str

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	class ConfigDict:
		json_schema_extra = {
			'example': {'from_currency': 'USD', 'to_currency': 'INR', 'amount': 10.00}
		}


class SourceCurrencyRequest(BaseModel):
	currency: str = Field(..., min_length=3, max_length=5)

	@field_validator('currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()
