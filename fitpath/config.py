from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Local persistence
    DATA_DIR: Path = Path.home() / ".fitpath"
    STORE_FILENAME: str = "store.json"
    PROFILE_KEY: str = "fitpath-profile"
    PROGRESS_KEY: str = "fitpath-progress"

    @property
    def store_path(self) -> Path:
        return self.DATA_DIR / self.STORE_FILENAME


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Allow Streamlit secrets to override or provide env values
    overrides: dict = {}
    try:
        import streamlit as _st  # type: ignore
        sec = getattr(_st, "secrets", None)
        if sec:
            for k in ["APP_ENV", "LOG_LEVEL", "DATA_DIR", "STORE_FILENAME"]:
                if k in sec and sec[k] is not None and sec[k] != "":
                    overrides[k] = sec[k]
    except Exception:
        # st.secrets raises when no secrets.toml exists; env values still apply
        pass
    return Settings(**overrides)  # type: ignore[arg-type]


_LOGGING_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Apply LOG_LEVEL to the root logger once per process."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    lvl = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, lvl, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGING_CONFIGURED = True
