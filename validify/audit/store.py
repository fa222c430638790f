"""Append-only alert log stored as a single JSON array file."""
import asyncio
import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import structlog

from validify.audit.records import AlertRecord

logger = structlog.get_logger(__name__)


class EventLogStore:
    """
    Persists alert records to a human-readable JSON array.

    Every append rewrites the whole file (read, append, write), which is
    fine at moderation-alert volume. Appends are serialised through an
    asyncio lock so interleaved handlers never overwrite each other's
    records. The store is best-effort: I/O failures are logged and
    swallowed so a broken log never blocks alert delivery.
    """

    def __init__(self, path: Path):
        """
        Initialize the store.

        Args:
            path: JSON file holding the record array; created on first append
        """
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def _load(self) -> List[Dict[str, Any]]:
        """
        Load the current array.

        A missing file reads as empty. An existing file that is not a JSON
        array raises, so it is never overwritten.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []

        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not hold a JSON array")
        return data

    def _read(self) -> List[Dict[str, Any]]:
        try:
            return self._load()
        except (OSError, ValueError) as e:
            logger.warning("alert_log_unreadable", path=str(self.path), error=str(e))
            return []

    def _write(self, records: List[Dict[str, Any]]) -> None:
        """Replace the file contents via a temp file in the same directory."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _append_sync(self, entry: Dict[str, Any]) -> None:
        records = self._load()
        records.append(entry)
        self._write(records)

    async def append(self, record: AlertRecord) -> bool:
        """
        Append a record, stamping it with the current UTC time.

        Args:
            record: The alert record to persist

        Returns:
            True if the record was written, False if the write failed
        """
        entry = {**record.to_dict(), "ts": datetime.now(timezone.utc).isoformat()}

        async with self._lock:
            try:
                await asyncio.to_thread(self._append_sync, entry)
            except (OSError, TypeError, ValueError) as e:
                logger.error("alert_log_write_failed", path=str(self.path), type=record.kind, error=str(e))
                return False

        logger.debug("alert_logged", type=record.kind, guild_id=record.guild_id)
        return True

    async def read_all(self) -> List[Dict[str, Any]]:
        """Return every persisted record, oldest first."""
        async with self._lock:
            return await asyncio.to_thread(self._read)


__all__ = ["EventLogStore"]
