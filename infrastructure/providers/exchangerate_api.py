import logging
import math
from decimal import Decimal

import httpx

from domain.exceptions.currency import DataError, NetworkError, TransportError
from domain.models.currency import RateSet

logger = logging.getLogger(__name__)


class ExchangeRateAPIProvider:
    BASE_URL = "https://api.exchangerate-api.com/v4/latest"

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def name(self) -> str:
        return "exchangerate-api"

    async def _request(self, base_code: str) -> object:
        url = f"{self.base_url}/{base_code}"
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"{self.name} returned HTTP {status_code} for {base_code}")
            raise TransportError(status_code) from e
        except httpx.TimeoutException as e:
            logger.warning(f"{self.name} timed out after {self.timeout}s for {base_code}")
            raise NetworkError(f"Request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            logger.warning(f"{self.name} request failed for {base_code}: {e.__class__.__name__}")
            raise NetworkError(f"Request failed: {e.__class__.__name__}") from e

        try:
            return response.json()
        except ValueError as e:
            raise DataError() from e

    async def fetch_rates(self, base_code: str) -> RateSet:
        data = await self._request(base_code)
        rate_set = RateSet(base_code=base_code, rates=self._parse_rates(data))
        logger.info(f"Fetched {len(rate_set.rates)} rates from {self.name} for base {base_code}")
        return rate_set

    @staticmethod
    def _parse_rates(data: object) -> dict[str, Decimal]:
        if not isinstance(data, dict):
            raise DataError()
        raw_rates = data.get("rates")
        if not isinstance(raw_rates, dict):
            raise DataError()

        rates: dict[str, Decimal] = {}
        for code, value in raw_rates.items():
            if (
                not isinstance(code, str)
                or isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not math.isfinite(value)
                or value <= 0
            ):
                raise DataError()
            rates[code] = Decimal(str(value))
        return rates

    async def close(self) -> None:
        await self._client.aclose()
