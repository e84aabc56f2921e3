from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final

LARGE_AMOUNT_THRESHOLD: Final = Decimal(1000)

_TWO_PLACES: Final = Decimal('0.01')
_FOUR_PLACES: Final = Decimal('0.0001')

CURRENCY_SYMBOLS: Final[dict[str, str]] = {
	'USD': '$',
	'EUR': '€',
	'GBP': '£',
	'INR': '₹',
	'JPY': '¥',
	'CNY': 'CN¥',
	'KRW': '₩',
	'ILS': '₪',
	'VND': '₫',
	'NGN': '₦',
	'PHP': '₱',
	'UAH': '₴',
	'BRL': 'R$',
	'MXN': 'MX$',
	'CAD': 'CA$',
	'AUD': 'A$',
	'NZD': 'NZ$',
	'HKD': 'HK$',
	'TWD': 'NT$',
	'XAF': 'FCFA',
	'XOF': 'F CFA',
}


# ISO 4217 active codes; anything else takes the plain fallback
ISO_4217_CODES: Final[frozenset[str]] = frozenset(
	'AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND BOB BOV '
	'BRL BSD BTN BWP BYN BZD CAD CDF CHE CHF CHW CLF CLP CNY COP COU CRC CUC CUP CVE '
	'CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD '
	'HNL HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW KWD KYD '
	'KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR MVR MWK MXN MXV '
	'MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD RUB '
	'RWF SAR SBD SCR SDG SEK SGD SHP SLE SLL SOS SRD SSP STN SVC SYP SZL THB TJS TMT '
	'TND TOP TRY TTD TWD TZS UAH UGX USD USN UYI UYU UYW UZS VED VES VND VUV WST XAF '
	'XAG XAU XBA XBB XBC XBD XCD XDR XOF XPD XPF XPT XSU XTS XUA XXX YER ZAR ZMW ZWL'.split()
)


def _to_decimal(value: Decimal | float | int) -> Decimal:
	if isinstance(value, Decimal):
		return value
	return Decimal(str(value))


def _quantize(value: Decimal, places: Decimal) -> Decimal:
	return value.quantize(places, rounding=ROUND_HALF_UP)


def format_number(amount: Decimal | float | int) -> str:
	"""Group thousands; 2 fractional digits above 1000, otherwise 2 to 4."""
	value = _to_decimal(amount)
	if abs(value) > LARGE_AMOUNT_THRESHOLD:
		return f'{_quantize(value, _TWO_PLACES):,.2f}'

	text = f'{_quantize(value, _FOUR_PLACES):,.4f}'
	whole, fraction = text.split('.')
	fraction = fraction.rstrip('0').ljust(2, '0')
	return f'{whole}.{fraction}'


def format_display(amount: Decimal | float | int, currency_code: str) -> str:
	"""Render ``amount`` in ``currency_code``.

	ISO codes without a symbol are prefixed with the code (``"CHF 1,500.50"``);
	codes outside ISO 4217 fall back to ``"CODE 1234.5678"``.
	"""
	try:
		value = _to_decimal(amount)
	except (InvalidOperation, ValueError):
		return f'{currency_code} {amount}'

	if not value.is_finite():
		return f'{currency_code} {value}'

	code = currency_code.upper()
	sign = '-' if value < 0 else ''
	symbol = CURRENCY_SYMBOLS.get(code)
	if symbol is not None:
		return f'{sign}{symbol}{format_number(abs(value))}'
	if code in ISO_4217_CODES:
		return f'{sign}{code} {format_number(abs(value))}'
	return f'{currency_code} {_quantize(value, _FOUR_PLACES):.4f}'


def format_rate_line(source_code: str, target_code: str, rate: Decimal | float | int) -> str:
	value = _quantize(_to_decimal(rate), _FOUR_PLACES)
	return f'1 {source_code} = {value:.4f} {target_code}'
