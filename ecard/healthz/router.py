from fastapi import APIRouter
from pydantic import BaseModel

from ecard import __version__

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = __version__


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Liveness probe for the load balancer."""
    return HealthCheckResponse(status="healthy")
