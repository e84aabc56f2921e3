import logging

from application.services import ConversionController
from config.settings import get_settings
from domain.models.currency import ConversionState
from infrastructure.providers import ExchangeRateAPIProvider
from infrastructure.repositories.rates import RateRepository

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	controller: ConversionController | None = None


deps = AppDependencies()


def log_state_transition(state: ConversionState) -> None:
	if state.message:
		logger.info(f'Converter state: {state.status.value} ({state.message})')
	elif state.result:
		logger.info(
			f'Converter state: {state.status.value} '
			f'{state.result.display_rate}, result {state.result.display_amount}'
		)
	else:
		logger.info(f'Converter state: {state.status.value}')


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	provider = ExchangeRateAPIProvider(
		base_url=settings.RATES_API_URL, timeout=settings.RATE_FETCH_TIMEOUT
	)
	repository = RateRepository(provider, bootstrap_currency=settings.BOOTSTRAP_CURRENCY)
	deps.controller = ConversionController(
		repository,
		default_source=settings.DEFAULT_SOURCE_CURRENCY,
		default_target=settings.DEFAULT_TARGET_CURRENCY,
	)
	deps.controller.subscribe(log_state_transition)
	logger.info('Dependencies initialized')


async def bootstrap() -> None:
	"""Load the currency list. Called after init_dependencies() at startup."""
	logger.info('Bootstrapping application...')

	if deps.controller is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	state = await deps.controller.initialize()
	if deps.controller.is_ready:
		logger.info('Bootstrap complete')
	else:
		logger.error(f'Bootstrap failed, converter not ready: {state.message}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.controller:
		await deps.controller.dispose()
		deps.controller = None

	logger.info('Cleanup complete')


def get_controller() -> ConversionController:
	if deps.controller is None:
		raise RuntimeError('Converter not initialized')
	return deps.controller
