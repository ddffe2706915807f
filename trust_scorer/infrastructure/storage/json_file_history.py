"""History store persisted as a single JSON document."""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ...domain.models.result import VerificationResult
from ...domain.ports.history_store import HistoryStore

logger = logging.getLogger(__name__)


class JsonFileHistoryStore(HistoryStore):
    """Stores ``{"verifications": [...]}`` in a file, most recent first.

    Unreadable files are treated as an empty history; entries that no
    longer match the result schema are skipped.
    """

    def __init__(self, path: Union[str, Path], limit: int = 100):
        """Initialize the store.

        Args:
            path: JSON file location; parent directories are created on write
            limit: Maximum number of results kept
        """
        self._path = Path(path)
        self._limit = limit
        self._lock = asyncio.Lock()

    def _read(self) -> List[Dict[str, Any]]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"⚠️ Could not read history file {self._path}: {e}")
            return []
        entries = data.get("verifications") if isinstance(data, dict) else None
        return entries if isinstance(entries, list) else []

    def _write(self, entries: List[Dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"verifications": entries}, f)
            os.replace(tmp_path, self._path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    async def append(self, result: VerificationResult) -> None:
        async with self._lock:
            entries = await asyncio.to_thread(self._read)
            entries.insert(0, result.model_dump(mode="json", by_alias=True))
            await asyncio.to_thread(self._write, entries[: self._limit])

    async def list(self) -> List[VerificationResult]:
        async with self._lock:
            entries = await asyncio.to_thread(self._read)

        results = []
        for entry in entries[: self._limit]:
            try:
                results.append(VerificationResult.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"⚠️ Skipping malformed history entry: {e.error_count()} error(s)")
        return results

    async def clear(self) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write, [])

    @property
    def backend_name(self) -> str:
        return "json_file"

    @property
    def path(self) -> Path:
        return self._path
