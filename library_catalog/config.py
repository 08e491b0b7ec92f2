"""
Runtime configuration read from the environment.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Settings for the catalog API and scripts."""

    db_path: Path = Path("data/catalog.db")
    """SQLite database file"""

    seed_sample_data: bool = True
    """Load the sample books on startup when the catalog is empty"""

    log_level: str = "INFO"
    """Root logging level"""

    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from CATALOG_* environment variables."""
        return cls(
            db_path=Path(os.getenv("CATALOG_DB_PATH", "data/catalog.db")),
            seed_sample_data=_env_flag("CATALOG_SEED_SAMPLE_DATA", True),
            log_level=os.getenv("CATALOG_LOG_LEVEL", "INFO").upper(),
            host=os.getenv("CATALOG_HOST", "0.0.0.0"),
            port=int(os.getenv("CATALOG_PORT", "8000")),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for entry points (API server, scripts)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
