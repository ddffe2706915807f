"""Health check endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...infrastructure.dependencies import ServiceContainer, get_service_container

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    container: ServiceContainer = Depends(get_service_container),
) -> Dict[str, Any]:
    """Check the health of all service components.

    Returns:
        Status of the evidence provider, the content analyzer and the
        history backend
    """
    return {
        "status": "healthy",
        "evidence_providers": {
            name.title(): is_active
            for name, is_active in container.evidence_status.items()
        },
        "analysis_provider": {
            "name": container.analyzer.provider_name,
            "available": container.analyzer.is_available,
        },
        "history_backend": container.history_store.backend_name,
    }
