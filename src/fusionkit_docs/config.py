"""Runtime configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_log_level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper()
    if value not in LOG_LEVELS:
        logger.warning(f"Unknown log level {value!r} in {name}, using {default}")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Server settings.

    Every field can be set through a ``FUSIONKIT_*`` environment variable and
    overridden again by command-line flags.
    """

    docs_path: Path = Path("docs")
    cache_index: bool = False
    fk_command: str = "fk"
    log_level: str = "INFO"
    open_browser: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            docs_path=Path(os.getenv("FUSIONKIT_DOCS_PATH", "docs")),
            cache_index=_env_flag("FUSIONKIT_DOCS_CACHE", False),
            fk_command=os.getenv("FUSIONKIT_FK_COMMAND", "fk"),
            log_level=_env_log_level("FUSIONKIT_LOG_LEVEL", "INFO"),
            open_browser=_env_flag("FUSIONKIT_OPEN_BROWSER", True),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(**overrides) -> Settings:
    """Replace selected settings fields (``None`` values are ignored)."""
    global _settings
    changes = {key: value for key, value in overrides.items() if value is not None}
    if "docs_path" in changes:
        changes["docs_path"] = Path(changes["docs_path"])
    _settings = replace(get_settings(), **changes)
    logger.debug(f"Settings updated: {_settings}")
    return _settings


def reset_settings() -> None:
    """Drop the loaded settings so the next access re-reads the environment."""
    global _settings
    _settings = None
