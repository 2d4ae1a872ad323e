# shared/config.py
# Process configuration, read once from the environment (and .env if present).

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from constants import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_MONGO_URL,
    DEFAULT_PORT,
    DEFAULT_STATIC_DIR,
)


@dataclass(frozen=True)
class Settings:
    port:             int = DEFAULT_PORT
    mongo_url:        str = DEFAULT_MONGO_URL
    mongo_timeout_ms: int = 3000
    max_body_bytes:   int = DEFAULT_MAX_BODY_BYTES
    static_dir:       str = DEFAULT_STATIC_DIR
    log_level:        str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Builds Settings from environment variables.
        Pass a mapping to read from it instead of os.environ (tests do this).
        """
        if env is None:
            load_dotenv()
            env = os.environ

        return cls(
            port=int(env.get("PORT") or DEFAULT_PORT),
            mongo_url=env.get("MONGO_URL") or DEFAULT_MONGO_URL,
            mongo_timeout_ms=int(env.get("MONGO_TIMEOUT_MS") or 3000),
            max_body_bytes=int(env.get("MAX_BODY_BYTES") or DEFAULT_MAX_BODY_BYTES),
            static_dir=env.get("STATIC_DIR") or DEFAULT_STATIC_DIR,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
