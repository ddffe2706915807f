"""Content verification endpoint."""

import logging

from fastapi import APIRouter, Depends

from ...domain.models.request import VerificationRequest
from ...domain.models.result import VerificationResult
from ...domain.services.verification_service import VerificationService
from ...infrastructure.dependencies import get_verification_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["verification"])


@router.post("/verify", response_model=VerificationResult, response_model_by_alias=True)
async def verify_content(
    request: VerificationRequest,
    service: VerificationService = Depends(get_verification_service),
) -> VerificationResult:
    """Verify text or a URL and return its trust score.

    Args:
        request: Content to verify

    Returns:
        Verification result; failures inside the pipeline degrade the
        result instead of failing the request
    """
    logger.info(f"📥 Verification request ({request.content_type.value}): {request.content[:100]}")
    return await service.verify(request)
