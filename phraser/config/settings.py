"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)

# Options: "json", "sqlite", "memory"
STORE_BACKEND = os.environ.get("PHRASER_STORE_BACKEND", "json").strip().lower()


@dataclass
class Config:
    """Application-wide configuration."""
    
    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of phraser/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()
    
    DATA_DIR: str = os.environ.get("PHRASER_DATA_DIR", str(BASE_DIR / "data"))
    
    # Storage backend
    STORE_BACKEND: str = STORE_BACKEND
    STORE_PATH: str = os.environ.get(
        "PHRASER_STORE_PATH",
        str(Path(DATA_DIR) / ("phraser.db" if STORE_BACKEND == "sqlite" else "store")),
    )
    
    LOG_LEVEL: str = os.environ.get("PHRASER_LOG_LEVEL", "WARNING").upper()
    
    # Export file naming: <prefix>-YYYY-MM-DD.csv
    EXPORT_PREFIX: str = "phraser-translations"
