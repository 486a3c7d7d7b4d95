"""
===============================================================================
MÓDULO: Logger estructurado (JSON) con contexto de request
===============================================================================

Los logs tienen que ser:
- Parseables (un objeto JSON por línea)
- Correlacionables (request_id / method / path / principal)
- Seguros (claves sensibles redactadas, valores enormes truncados)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  JSONFormatter + setup_logger()

Responsabilidades:
  - Formatear LogRecords como JSON
  - Enriquecer con el contexto de request de decorbook/context.py
  - Redactar secretos (tokens, claves de Stripe, service account)

Colaboradores:
  - decorbook/context.py (ContextVars)
  - crosscutting/config.py (nivel y formato)
===============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from ..context import get_context_dict

# Atributos de LogRecord que nunca se copian como "extra".
_INTERNAL_LOGRECORD_KEYS: set[str] = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "message",
    "taskName",
}


class _Redactor:
    """Redacta claves sensibles y recorta valores enormes antes de loguear."""

    SENSITIVE_KEYS = {
        "password",
        "secret",
        "token",
        "authorization",
        "api_key",
        "access_token",
        "id_token",
        "private_key",
        "credential",
        "stripe_secret_key",
        "fb_service_key",
        "jwt_secret",
    }

    def __init__(self, max_str: int = 8_000, max_depth: int = 4):
        self._max_str = max_str
        self._max_depth = max_depth

    def sanitize(self, value: Any, *, depth: int = 0, key: str | None = None) -> Any:
        if key and key.lower() in self.SENSITIVE_KEYS:
            return "***REDACTED***"

        if depth > self._max_depth:
            return "***TRUNCATED***"

        if isinstance(value, str):
            if len(value) <= self._max_str:
                return value
            return value[: self._max_str] + "...(truncated)"

        if isinstance(value, (bytes, bytearray)):
            return f"<bytes {len(value)}B>"

        if isinstance(value, dict):
            return {
                str(k): self.sanitize(v, depth=depth + 1, key=str(k))
                for k, v in value.items()
            }

        if isinstance(value, (list, tuple)):
            return [self.sanitize(v, depth=depth + 1, key=key) for v in value]

        if isinstance(value, (int, float, bool)) or value is None:
            return value

        return str(value)


class JSONFormatter(logging.Formatter):
    """
    Convierte un LogRecord en una sola línea JSON.

    Se mezcla el contexto de request (request_id, method, path, principal)
    cuando existe; los campos de ``extra=`` se redactan y se copian.
    """

    def __init__(self):
        super().__init__()
        self._redactor = _Redactor()

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "pid": os.getpid(),
        }

        ctx = get_context_dict()
        if ctx:
            payload.update(ctx)

        for k, v in record.__dict__.items():
            if k in _INTERNAL_LOGRECORD_KEYS:
                continue
            payload[k] = self._redactor.sanitize(v, key=k)

        if record.exc_info:
            exc_type = record.exc_info[0].__name__ if record.exc_info[0] else None
            exc_msg = str(record.exc_info[1]) if record.exc_info[1] else None
            payload["exception"] = {
                "type": exc_type,
                "message": exc_msg,
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(
            payload, ensure_ascii=False, default=str, separators=(",", ":")
        )


def setup_logger(name: str = "decorbook") -> logging.Logger:
    """
    Crea y configura el logger de la aplicación.

    - Evita duplicación de handlers en reimport
    - Toma log_level / log_json desde Settings
    """
    from .config import get_settings

    log = logging.getLogger(name)
    settings = get_settings()
    level = (settings.log_level or "INFO").upper()
    use_json = settings.log_json

    log.setLevel(getattr(logging, level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            JSONFormatter()
            if use_json
            else logging.Formatter("%(levelname)s %(message)s")
        )
        log.addHandler(handler)

    return log


logger = setup_logger()
