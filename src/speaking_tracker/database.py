"""JSON file storage and session management."""

import asyncio
import json
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator, Optional

from .config import get_settings
from .models.document import SCHEMA_VERSION, TrackerData, upgrade_document
from .models.settings import UISettings

logger = logging.getLogger("json_store")


def _write_json(path: Path, payload: Any) -> None:
    """Write JSON next to the target and move it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False)
            fh.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class JsonStore:
    """Read/modify/write access to the data file and the settings file."""

    def __init__(self, data_path: Path, settings_path: Path):
        self.data_path = data_path
        self.settings_path = settings_path

    def load(self) -> TrackerData:
        if not self.data_path.exists():
            return TrackerData()
        raw = json.loads(self.data_path.read_text(encoding="utf-8"))
        version = raw.get("version", 1)
        if version < SCHEMA_VERSION:
            logger.info(f"Upgrading {self.data_path} from schema v{version} to v{SCHEMA_VERSION}")
        return upgrade_document(raw)

    def save(self, data: TrackerData) -> None:
        _write_json(self.data_path, data.model_dump(by_alias=True))

    def load_settings(self) -> UISettings:
        if not self.settings_path.exists():
            return UISettings()
        raw = json.loads(self.settings_path.read_text(encoding="utf-8"))
        return UISettings.model_validate(raw)

    def save_settings(self, settings: UISettings) -> None:
        _write_json(self.settings_path, settings.model_dump(by_alias=True))


class JsonDatabase:
    """JSON store connection manager."""

    _store: Optional[JsonStore] = None
    _lock: Optional[asyncio.Lock] = None

    @classmethod
    def connect(cls, data_file: Optional[str] = None, settings_file: Optional[str] = None) -> None:
        """Point the database at its files. Defaults come from settings."""
        settings = get_settings()
        cls._store = JsonStore(
            Path(data_file or settings.data_file),
            Path(settings_file or settings.settings_file),
        )
        cls._lock = asyncio.Lock()
        logger.info(f"Using data file {cls._store.data_path}")

    @classmethod
    def disconnect(cls) -> None:
        """Forget the store."""
        cls._store = None
        cls._lock = None

    @classmethod
    def get_store(cls) -> JsonStore:
        """Get the store instance."""
        if not cls._store:
            raise RuntimeError("Database not connected. Call connect() first.")
        return cls._store

    @classmethod
    @asynccontextmanager
    async def session(cls) -> AsyncGenerator[TrackerData, None]:
        """Load the document, yield it, and save it if the block succeeds."""
        store = cls.get_store()
        async with cls._lock:
            data = await asyncio.to_thread(store.load)
            yield data
            await asyncio.to_thread(store.save, data)

    @classmethod
    async def read(cls) -> TrackerData:
        """Load the document without writing it back."""
        store = cls.get_store()
        async with cls._lock:
            return await asyncio.to_thread(store.load)

    @classmethod
    async def read_settings(cls) -> UISettings:
        """Load the settings without writing them back."""
        store = cls.get_store()
        async with cls._lock:
            return await asyncio.to_thread(store.load_settings)

    @classmethod
    async def update_settings(cls, updates: dict[str, Any]) -> UISettings:
        """Merge ``updates`` into the saved settings under the store lock."""
        store = cls.get_store()
        async with cls._lock:
            current = await asyncio.to_thread(store.load_settings)
            settings = UISettings.model_validate({**current.model_dump(), **updates})
            await asyncio.to_thread(store.save_settings, settings)
            return settings
