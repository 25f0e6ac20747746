"""
Key-value storage for the session token.

Workflows only see the ``SessionStore`` interface, so the backing storage
can be swapped without touching them. Writes are last-writer-wins.
"""
import asyncio
import json
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

import aiofiles
import aiofiles.os

from AuthPortal.config import config
from AuthPortal.core.logging import get_logger

logger = get_logger(__name__)


class SessionStore(ABC):
    """Minimal async key-value store."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored value or None."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete ``key`` if present."""


class MemorySessionStore(SessionStore):
    """Process-local store; contents are lost on exit."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileSessionStore(SessionStore):
    """
    Store backed by a JSON object on disk.

    Uses async file I/O so token writes do not block the event loop.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Args:
            path: JSON file to use, defaults to ``config.SESSION_STORE_FILE``
        """
        self._path = path or config.SESSION_STORE_FILE
        self._write_lock = asyncio.Lock()

    @property
    def path(self) -> str:
        return self._path

    async def _load(self) -> Dict[str, str]:
        try:
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                content = await f.read()
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable session file %s", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    async def _save(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(self._path)
        if directory:
            await aiofiles.os.makedirs(directory, exist_ok=True)
        async with aiofiles.open(self._path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(data, ensure_ascii=False, indent=2))

    async def get(self, key: str) -> Optional[str]:
        data = await self._load()
        value = data.get(key)
        return value if isinstance(value, str) else None

    async def set(self, key: str, value: str) -> None:
        async with self._write_lock:
            data = await self._load()
            data[key] = value
            await self._save(data)

    async def remove(self, key: str) -> None:
        async with self._write_lock:
            data = await self._load()
            if data.pop(key, None) is not None:
                await self._save(data)
