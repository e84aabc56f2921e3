from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_controller
from api.error_handlers import ConversionFailedError
from api.schemas import (
	ConversionRequest,
	ConversionStateResponse,
	SourceCurrencyRequest,
	SupportedCurrenciesResponse,
)
from application.services import ConversionController
from domain.exceptions.currency import NotReadyError
from domain.models.currency import ConversionState, ConversionStatus

router = APIRouter(prefix='/api', tags=['currency'])


def _respond(controller: ConversionController, state: ConversionState) -> ConversionStateResponse:
	if state.status is ConversionStatus.FAILED:
		raise ConversionFailedError(state)
	return ConversionStateResponse.build(
		state,
		source_currency=controller.source_code,
		target_currency=controller.target_code,
		rates_base=controller.rates.base_code if controller.rates else None,
	)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> SupportedCurrenciesResponse:
	if not controller.is_ready:
		raise NotReadyError()
	return SupportedCurrenciesResponse(currencies=controller.sorted_currencies)


@router.get(
	'/state',
	response_model=ConversionStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Current converter state',
)
async def get_state(
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> ConversionStateResponse:
	return ConversionStateResponse.build(
		controller.state,
		source_currency=controller.source_code,
		target_currency=controller.target_code,
		rates_base=controller.rates.base_code if controller.rates else None,
	)


@router.post(
	'/initialize',
	response_model=ConversionStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Load (or reload) the supported currency list',
)
async def initialize(
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> ConversionStateResponse:
	return _respond(controller, await controller.initialize())


@router.post(
	'/convert',
	response_model=ConversionStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	request: ConversionRequest,
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> ConversionStateResponse:
	controller.set_amount(request.amount)
	controller.select_source(request.from_currency)
	controller.set_target_code(request.to_currency)
	return _respond(controller, await controller.convert())


@router.put(
	'/source',
	response_model=ConversionStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Change the source currency and refresh rates',
)
async def set_source_currency(
	request: SourceCurrencyRequest,
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> ConversionStateResponse:
	return _respond(controller, await controller.set_source_code(request.currency))


@router.post(
	'/swap',
	response_model=ConversionStateResponse,
	status_code=status.HTTP_200_OK,
	summary='Swap source and target currencies',
)
async def swap_currencies(
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> ConversionStateResponse:
	return _respond(controller, await controller.swap())
