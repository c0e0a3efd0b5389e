import os
from dataclasses import dataclass
from typing import Optional

# Configurações globais de ambiente
WEBHOOK_URL = os.getenv("WEBHOOK_URL", "")
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
_timeout_env = os.getenv("WEBHOOK_TIMEOUT_SECONDS", "").strip()
WEBHOOK_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None

# Google Chat: menciona todos os usuários do espaço
MENTION_ALL = "<users/all>"

DANGER_PREFIX = "[DANGER]"
HEALTH_STATE = "ok"

# Níveis de alerta -> cor da fonte no card
ALERT_LEVELS = {
    "danger": {"color": "#fc2f2f"},
    "warn": {"color": "#ffcc14"},
    "health": {"color": "#27d871"},
}

DANGER_COLOR = ALERT_LEVELS["danger"]["color"]
WARN_COLOR = ALERT_LEVELS["warn"]["color"]
HEALTH_COLOR = ALERT_LEVELS["health"]["color"]


@dataclass(frozen=True)
class ForwarderSettings:
    """Configuração lida uma única vez no start do processo e injetada no app."""

    webhook_url: str = ""
    timeout_seconds: Optional[float] = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None):
        if environ is None:
            return cls(
                webhook_url=WEBHOOK_URL,
                timeout_seconds=WEBHOOK_TIMEOUT_SECONDS,
                debug=DEBUG_MODE,
            )
        timeout_raw = environ.get("WEBHOOK_TIMEOUT_SECONDS", "").strip()
        return cls(
            webhook_url=environ.get("WEBHOOK_URL", ""),
            timeout_seconds=float(timeout_raw) if timeout_raw else None,
            debug=environ.get("DEBUG_MODE", "False").lower() == "true",
        )
