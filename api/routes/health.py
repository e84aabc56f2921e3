from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_controller
from api.schemas import HealthResponse
from application.services import ConversionController

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Liveness and readiness')
async def health(
	controller: Annotated[ConversionController, Depends(get_controller)],
) -> HealthResponse:
	return HealthResponse(status='ok', ready=controller.is_ready)
