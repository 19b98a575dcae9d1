"""
Runtime Settings
================

Read from the environment (and a ``.env`` file, if present) once at import.

Variables:
- SYSTEMATICS_HOST: bind address (default 127.0.0.1)
- SYSTEMATICS_PORT: bind port (default 8000)
- SYSTEMATICS_LOG_LEVEL: logging level name (default INFO)
- SYSTEMATICS_CORS_ORIGINS: comma-separated allowed origins (default *)
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> list[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.environ.get("SYSTEMATICS_HOST", "127.0.0.1"),
            port=int(os.environ.get("SYSTEMATICS_PORT", "8000")),
            log_level=os.environ.get("SYSTEMATICS_LOG_LEVEL", "INFO"),
            cors_origins=_split_origins(os.environ.get("SYSTEMATICS_CORS_ORIGINS", "*")),
        )


settings = Settings.from_env()
