# scanlings/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_REQUIRE_DEVICE_ID = "REQUIRE_DEVICE_ID"
ENV_LOG_LEVEL = "LOG_LEVEL"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8787
CONSOLE_HANDLER_NAME = "scanlings-console"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _coerce_bool(value: Optional[str], *, default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def _coerce_port(value: Optional[str]) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    require_device_id: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            host=(env.get(ENV_HOST) or DEFAULT_HOST).strip(),
            port=_coerce_port(env.get(ENV_PORT)),
            require_device_id=_coerce_bool(env.get(ENV_REQUIRE_DEVICE_ID), default=False),
            log_level=(env.get(ENV_LOG_LEVEL) or "INFO").strip().upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Attach one console handler to the root logger; safe to call twice."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(h.get_name() == CONSOLE_HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(CONSOLE_HANDLER_NAME)
    root.addHandler(handler)
