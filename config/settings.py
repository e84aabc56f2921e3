from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	RATES_API_URL: str = 'https://api.exchangerate-api.com/v4/latest'
	RATE_FETCH_TIMEOUT: float = 10.0

	# Currency used for the startup fetch that discovers supported codes
	BOOTSTRAP_CURRENCY: str = 'USD'
	DEFAULT_SOURCE_CURRENCY: str = 'USD'
	DEFAULT_TARGET_CURRENCY: str = 'INR'

	# Application
	APP_NAME: str = 'Currency Converter'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_FORMAT: str = 'text'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
