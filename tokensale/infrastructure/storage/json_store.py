"""File-backed implementation of the ApplicationStore interface.

All applications live in a single JSON document, keyed by private id:

    {"<privateId>": {"privateId": ..., "publicId": ..., "email": ...}, ...}

Timestamps are written as ISO-8601 strings. The document is read lazily on
first access and rewritten after every write. Uses `aiofiles` for async I/O.

The in-memory copy only ever holds what is on disk: a write is applied to a
new mapping, flushed, and swapped in once the flush succeeded.
"""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import aiofiles

from tokensale.domain.models.application import Application
from tokensale.domain.models.common import PrivateId, PublicId, Record
from tokensale.infrastructure.storage.memory_store import DuplicateApplication, InMemoryApplicationStore

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path.home() / ".tokensale" / "applications.json"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonFileApplicationStore(InMemoryApplicationStore):
    """Application store persisted to a JSON file on the local disk."""

    def __init__(self, path: Path = DEFAULT_STORE_PATH):
        super().__init__()
        self.path = Path(path)
        self._loaded = False
        # Writers hold _write_lock, then _load_lock; readers only take _load_lock.
        self._write_lock = asyncio.Lock()
        self._load_lock = asyncio.Lock()
        logger.info(f"JsonFileApplicationStore initialized (path={self.path}).")

    async def _read_documents(self) -> Dict[str, Record]:
        if not self.path.is_file():
            logger.debug(f"Store file not found, starting empty: {self.path}")
            return {}
        async with aiofiles.open(self.path, mode='r', encoding='utf-8') as f:
            content = await f.read()
        return json.loads(content) if content.strip() else {}

    async def _ensure_loaded(self) -> None:
        """Reads the JSON document into memory on first use, exactly once."""
        if self._loaded:
            return
        async with self._load_lock:
            if self._loaded:
                return
            documents = await self._read_documents()
            self._applications = {
                PrivateId(private_id): Application.from_record(record)
                for private_id, record in documents.items()
            }
            self._loaded = True
            logger.debug(f"Loaded {len(documents)} applications from {self.path}")

    async def _flush(self, applications: Mapping[PrivateId, Application]) -> None:
        """Rewrites the JSON document from `applications`."""
        documents = {
            private_id: application.to_record()
            for private_id, application in applications.items()
        }
        content = json.dumps(documents, indent=2, default=_json_default)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        async with aiofiles.open(tmp_path, mode='w', encoding='utf-8') as f:
            await f.write(content)
        tmp_path.replace(self.path)
        logger.debug(f"Wrote {len(documents)} applications to {self.path}")

    async def _commit(self, private_id: PrivateId, application: Application) -> None:
        applications = dict(self._applications)
        applications[private_id] = application
        try:
            await self._flush(applications)
        except Exception as e:
            logger.error(f"Failed to write application {private_id} to {self.path}: {e}")
            raise
        self._applications = applications

    # --- ApplicationStore Interface Implementation ---

    async def add(self, application: Application) -> None:
        async with self._write_lock:
            await self._ensure_loaded()
            if application.private_id in self._applications:
                raise DuplicateApplication(application.private_id)
            await self._commit(application.private_id, application)

    async def update(self, private_id: PrivateId, application: Application) -> None:
        async with self._write_lock:
            await self._ensure_loaded()
            if private_id not in self._applications:
                logger.warning(f"Update ignored, no application stored under {private_id}.")
                return
            await self._commit(private_id, application)

    async def get(self, private_id: PrivateId) -> Optional[Application]:
        await self._ensure_loaded()
        return await super().get(private_id)

    async def get_with_public_id(self, public_id: PublicId) -> Optional[Application]:
        await self._ensure_loaded()
        return await super().get_with_public_id(public_id)

    async def get_all(self) -> List[Application]:
        await self._ensure_loaded()
        return await super().get_all()
