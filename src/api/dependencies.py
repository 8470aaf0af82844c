"""
API Dependencies - Service container access for FastAPI endpoints

Pattern:
1. main_asyncio.py (or create_app) builds the ServiceContainer
2. set_service_container() stores it
3. Endpoints use get_service_container() via Depends()
"""

from typing import Optional
from fastapi import HTTPException, status
from services.service_container import ServiceContainer


_service_container: Optional[ServiceContainer] = None


def set_service_container(services: ServiceContainer) -> None:
    global _service_container
    _service_container = services


async def get_service_container() -> ServiceContainer:
    """
    FastAPI dependency for accessing service container.

    Raises:
        HTTPException: 503 Service Unavailable if services not initialized
    """
    if _service_container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service container not initialized."
        )
    return _service_container
