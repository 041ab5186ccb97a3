from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import db
from schemas import HealthResponse, LivenessResponse
from usecases import HealthUsecase

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(path="/liveness")
async def liveness() -> LivenessResponse:
    return LivenessResponse()


@router.get(path="/readiness")
async def readiness(
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[HealthUsecase, Depends(HealthUsecase)],
) -> HealthResponse:
    return HealthResponse.from_checks(checks=await usecase.health(session=session))
