"""File-backed JSON document and the store that owns its single handle."""
from __future__ import annotations

import asyncio
import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import DatabaseNotOpenError, DocumentCorruptError

logger = logging.getLogger(__name__)

Document = Dict[str, Dict[str, list]]


class JSONFileDocument:
    """A JSON object kept in memory and mirrored to a single file.

    ``data`` is the live document. Callers mutate it in place and then call
    :meth:`write`; nothing is rolled back if the write fails.
    """

    def __init__(self, path: Path | str, default: Dict[str, Any]) -> None:
        self._path = Path(path)
        self._default = default
        self.data: Dict[str, Any] = copy.deepcopy(default)
        self._write_lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def read(self) -> None:
        loop = asyncio.get_running_loop()
        loaded = await loop.run_in_executor(None, self._read_sync)
        self.data = copy.deepcopy(self._default) if loaded is None else loaded

    async def write(self) -> None:
        """Persist ``data``; overlapping writes land on disk in call order."""

        async with self._write_lock:
            payload = json.dumps(self.data, ensure_ascii=False, indent=2)
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._write_sync, payload)

    def _read_sync(self) -> Optional[Dict[str, Any]]:
        if not self._path.exists():
            return None
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return None
        try:
            loaded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentCorruptError(f"{self._path} is not valid JSON: {exc}") from exc
        if not isinstance(loaded, dict):
            raise DocumentCorruptError(
                f"{self._path} must contain a JSON object, found {type(loaded).__name__}"
            )
        return loaded

    def _write_sync(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class DocumentStore:
    """Owns the one open :class:`JSONFileDocument` for a process."""

    def __init__(self) -> None:
        self._handle: Optional[JSONFileDocument] = None
        self._open_lock: Optional[asyncio.Lock] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> JSONFileDocument:
        if self._handle is None:
            raise DatabaseNotOpenError("Document store has not been opened")
        return self._handle

    async def open(self, path: Path | str) -> JSONFileDocument:
        """Open ``path`` unless a document is already open, then return it."""

        if self._handle is not None:
            return self._handle
        if self._open_lock is None:
            self._open_lock = asyncio.Lock()
        async with self._open_lock:
            # Concurrent first callers wait here and reuse the finished read.
            if self._handle is not None:
                return self._handle
            document = JSONFileDocument(path, {})
            await document.read()
            self._handle = document
        logger.info("Opened guild document at %s", path)
        return document

    def reset(self) -> None:
        """Forget the open document so the next :meth:`open` starts fresh."""

        self._handle = None
        self._open_lock = None


__all__ = ["Document", "DocumentStore", "JSONFileDocument"]
