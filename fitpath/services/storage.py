from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from fitpath.config import get_settings
from fitpath.models.progress import Progress
from fitpath.models.user_profile import UserProfile

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    pass


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove partial write %s: %s", path, e)


class LocalStore:
    """Flat JSON key-value file, read in full and rewritten on every change."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers both bad JSON and bytes that are not UTF-8
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: top level is not an object", self.path)
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            _discard(tmp)
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def get(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

    def clear(self) -> None:
        if self.path.exists():
            try:
                self.path.unlink()
            except OSError as e:
                raise StorageError(f"Could not remove {self.path}: {e}") from e
        logger.info("Cleared store %s", self.path)


def get_store() -> LocalStore:
    return LocalStore(get_settings().store_path)


def load_user_profile(store: LocalStore) -> Optional[UserProfile]:
    raw = store.get(get_settings().PROFILE_KEY)
    if raw is None:
        return None
    try:
        return UserProfile.model_validate(raw)
    except ValidationError as e:
        logger.warning("Saved profile is invalid, ignoring it: %s", e)
        return None


def save_user_profile(store: LocalStore, profile: UserProfile) -> None:
    store.set(get_settings().PROFILE_KEY, profile.model_dump(mode="json", by_alias=True))
    logger.info("Saved profile to %s", store.path)


def load_progress(store: LocalStore) -> Optional[Progress]:
    raw = store.get(get_settings().PROGRESS_KEY)
    if raw is None:
        return None
    try:
        return Progress.model_validate(raw)
    except ValidationError as e:
        logger.warning("Saved progress is invalid, ignoring it: %s", e)
        return None


def save_progress(store: LocalStore, progress: Progress) -> None:
    store.set(get_settings().PROGRESS_KEY, progress.model_dump(mode="json", by_alias=True))
    logger.info("Saved progress (day=%d, completed=%d)", progress.current_day, len(progress.completed_days))
