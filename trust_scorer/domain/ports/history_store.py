"""Port interface for verification history persistence."""

from abc import ABC, abstractmethod
from typing import List

from ..models.result import VerificationResult


class HistoryStore(ABC):
    """Append-only store of past verification results.

    The engine only ever appends. ``list`` returns the most recent result
    first and never more than the configured limit (100 by default).
    """

    @abstractmethod
    async def append(self, result: VerificationResult) -> None:
        """Store a new result."""
        pass

    @abstractmethod
    async def list(self) -> List[VerificationResult]:
        """Return stored results, most recent first."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every stored result."""
        pass

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Get the storage backend name."""
        pass
