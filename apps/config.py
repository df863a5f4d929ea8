"""
Application settings read from the environment.

``.env`` is loaded on import; every value has a default so the console runs
out of the box with the YAML bundled under ``apps/configs/`` (installed as
package data).
"""

import os
from pathlib import Path
from typing import List, Optional

import dotenv

dotenv.load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parent / "configs"

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


class AppConfig:
    """Configuration for the console process."""

    def __init__(self,
                 components_path: Optional[str] = None,
                 catalog_path: Optional[str] = None,
                 roster_seed_path: Optional[str] = None,
                 prompts_path: Optional[str] = None,
                 log_level: Optional[str] = None,
                 cors_origins: Optional[List[str]] = None):
        self.components_path = components_path or os.getenv(
            "ACCESSDESK_COMPONENTS_PATH", str(CONFIG_DIR / "components.yaml")
        )
        self.catalog_path = catalog_path or os.getenv(
            "ACCESSDESK_CATALOG_PATH", str(CONFIG_DIR / "catalog.yaml")
        )
        # An empty string disables seeding.
        if roster_seed_path is None:
            roster_seed_path = os.getenv("ACCESSDESK_ROSTER_SEED_PATH", str(CONFIG_DIR / "roster.yaml"))
        self.roster_seed_path = roster_seed_path
        self.prompts_path = prompts_path or os.getenv(
            "ACCESSDESK_PROMPTS_PATH", str(CONFIG_DIR / "prompts.yaml")
        )
        self.log_level = (log_level or os.getenv("ACCESSDESK_LOG_LEVEL", "INFO")).upper()

        if cors_origins is None:
            raw = os.getenv("ACCESSDESK_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
            cors_origins = [o.strip() for o in raw.split(",") if o.strip()]
        self.cors_origins = cors_origins

        self.host = os.getenv("ACCESSDESK_HOST", "127.0.0.1")
        self.port = int(os.getenv("ACCESSDESK_PORT", "8000"))
        # Seconds an edit session may sit idle before it is dropped.
        self.session_ttl = float(os.getenv("ACCESSDESK_SESSION_TTL", "3600"))
