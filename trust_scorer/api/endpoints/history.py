"""Verification history endpoints."""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from ...domain.models.result import VerificationResult
from ...domain.ports.history_store import HistoryStore
from ...domain.services.history_stats import HistoryStats, summarize_history
from ...infrastructure.dependencies import get_history_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


async def _load(store: HistoryStore) -> List[VerificationResult]:
    try:
        return await store.list()
    except Exception as e:
        logger.error(f"❌ Failed to read history from {store.backend_name}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"History unavailable: {e}")


@router.get("", response_model=List[VerificationResult], response_model_by_alias=True)
async def list_history(store: HistoryStore = Depends(get_history_store)) -> List[VerificationResult]:
    """Return stored results, most recent first."""
    return await _load(store)


@router.delete("")
async def clear_history(store: HistoryStore = Depends(get_history_store)) -> Dict[str, str]:
    """Remove every stored result."""
    try:
        await store.clear()
    except Exception as e:
        logger.error(f"❌ Failed to clear history in {store.backend_name}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"History unavailable: {e}")
    logger.info("🧹 Verification history cleared")
    return {"status": "cleared"}


@router.get("/stats", response_model=HistoryStats, response_model_by_alias=True)
async def history_stats(store: HistoryStore = Depends(get_history_store)) -> HistoryStats:
    """Aggregate statistics over the stored results."""
    return summarize_history(await _load(store))
