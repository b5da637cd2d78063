"""Health check endpoints."""

from fastapi import APIRouter

from todo_api.core import StorageError

from ..config import get_api_settings
from ..dependencies import Store
from ..exceptions import ServiceUnavailableError
from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health status.

    Returns:
        Health status response
    """
    return HealthResponse(status="healthy", version=get_api_settings().version)


@router.get("/ready", response_model=HealthResponse)
async def readiness_check(store: Store) -> HealthResponse:
    """Check API readiness, including the todo store.

    Returns:
        Readiness status response

    Raises:
        ServiceUnavailableError: If the store cannot be reached
    """
    try:
        await store.ping()
    except StorageError as e:
        raise ServiceUnavailableError("Todo store", detail=e.detail) from e
    return HealthResponse(status="ready", version=get_api_settings().version)
