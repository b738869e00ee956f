from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import get_async_session

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    database: str = "ok"
    version: str = "0.1.0"


@router.get("/", response_model=HealthCheckResponse)
async def health_check(session: AsyncSession = Depends(get_async_session)) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running and the database answers.
    """
    await session.execute(text("SELECT 1"))
    return HealthCheckResponse(status="healthy")
