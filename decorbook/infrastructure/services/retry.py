"""decorbook.infrastructure.services.retry

Name: Retry Helper with Exponential Backoff + Jitter

Qué es
------
Utilidad de resiliencia para la escritura de seguimiento de los workflows en
dos pasos (asignación de decorador, aprobación de promoción). Implementa:
  - Clasificación de errores: **transient** (reintentar) vs **permanent**
    (fail-fast)
  - Decorator de `tenacity` con **exponential backoff + jitter**
  - Logging estructurado de cada intento

CRC (Component Card)
--------------------
Component: retry helper
Responsibilities:
  - Decidir qué errores son reintentables
  - Proveer un decorator estándar (tenacity) con backoff+jitter
  - Loguear intentos con contexto útil para debugging
Collaborators:
  - tenacity (motor de retry)
  - crosscutting.config.get_settings (attempts/delays)
  - crosscutting.exceptions.PlatformError (inspección de original_error)
Constraints:
  - Reintentar SOLO errores transitorios (conexión, timeouts, rate limits)
  - Nunca reintentar errores de validación ni de clave duplicada
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

import stripe
from pymongo.errors import AutoReconnect, ExecutionTimeout, NetworkTimeout
from pymongo.errors import ServerSelectionTimeoutError, WTimeoutError
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ...crosscutting.config import get_settings
from ...crosscutting.exceptions import PlatformError
from ...crosscutting.logger import logger

T = TypeVar("T")

# AutoReconnect cubre las subclases de ConnectionFailure en plena operación.
_TRANSIENT_MONGO_ERRORS = (
    AutoReconnect,
    NetworkTimeout,
    ServerSelectionTimeoutError,
    ExecutionTimeout,
    WTimeoutError,
)

_TRANSIENT_STRIPE_ERRORS = (
    stripe.APIConnectionError,
    stripe.RateLimitError,
)


def is_transient_error(exception: BaseException) -> bool:
    """R: Decide si un error es transient (retry) o permanent (fail-fast).

    Reglas (en orden):
      1) PlatformError que envuelve un error de driver/SDK: clasifica el original.
      2) Errores de conexión/timeout de pymongo: transient.
      3) Errores de conexión/rate-limit de Stripe: transient.
      4) TimeoutError/ConnectionError built-in: transient.
      5) Default: fail-fast.
    """
    if isinstance(exception, PlatformError):
        original = exception.original_error
        return original is not None and is_transient_error(original)

    if isinstance(exception, _TRANSIENT_MONGO_ERRORS):
        return True

    if isinstance(exception, _TRANSIENT_STRIPE_ERRORS):
        return True

    if isinstance(exception, (TimeoutError, ConnectionError)):
        return True

    return False


def _log_retry(retry_state: RetryCallState) -> None:
    """R: Loguea cada intento antes de dormir (hook before_sleep)."""
    fn = getattr(retry_state, "fn", None)
    fn_name = getattr(fn, "__name__", "unknown")
    wait_time = (
        retry_state.next_action.sleep if retry_state.next_action is not None else 0
    )

    exc: Optional[BaseException] = None
    if retry_state.outcome is not None:
        exc = retry_state.outcome.exception()

    logger.warning(
        "Retrying follow-up write",
        extra={
            "function": fn_name,
            "attempt": retry_state.attempt_number,
            "wait_seconds": round(float(wait_time), 2),
            "error": str(exc) if exc else None,
            "error_type": type(exc).__name__ if exc else None,
        },
    )


def create_retry_decorator(
    max_attempts: int | None = None,
    base_delay: float | None = None,
    max_delay: float | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """R: Construye un decorator de tenacity con exponential backoff + jitter.

    Config:
      - stop: `stop_after_attempt(max_attempts)`
      - wait: `wait_exponential_jitter(initial=base_delay, max=max_delay)`
      - retry: solo si `is_transient_error(exception)`
      - before_sleep: `_log_retry`
      - reraise: True (la última excepción se propaga)
    """
    settings = get_settings()

    _max_attempts = (
        settings.retry_max_attempts if max_attempts is None else max_attempts
    )
    _base_delay = (
        settings.retry_base_delay_seconds if base_delay is None else float(base_delay)
    )
    _max_delay = (
        settings.retry_max_delay_seconds if max_delay is None else float(max_delay)
    )

    if _max_attempts <= 0:
        raise ValueError("max_attempts must be > 0")
    if _base_delay < 0:
        raise ValueError("base_delay must be >= 0")
    if _max_delay <= 0:
        raise ValueError("max_delay must be > 0")

    return retry(
        stop=stop_after_attempt(_max_attempts),
        wait=wait_exponential_jitter(
            initial=_base_delay, max=_max_delay, jitter=_base_delay
        ),
        retry=retry_if_exception(is_transient_error),
        before_sleep=_log_retry,
        reraise=True,
    )
