"""In-memory history store."""

import asyncio
from collections import deque
from typing import Deque, List

from ...domain.models.result import VerificationResult
from ...domain.ports.history_store import HistoryStore


class InMemoryHistoryStore(HistoryStore):
    """Bounded, process-local history, most recent first."""

    def __init__(self, limit: int = 100):
        self._results: Deque[VerificationResult] = deque(maxlen=limit)
        self._lock = asyncio.Lock()

    async def append(self, result: VerificationResult) -> None:
        async with self._lock:
            self._results.appendleft(result)

    async def list(self) -> List[VerificationResult]:
        async with self._lock:
            return list(self._results)

    async def clear(self) -> None:
        async with self._lock:
            self._results.clear()

    @property
    def backend_name(self) -> str:
        return "memory"
