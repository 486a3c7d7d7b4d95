"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

CRC CARD (Módulo)
-------------------------------------------------------------------------------
Nombre:
    Métricas (Prometheus)

Responsabilidades:
    - Definir métricas Prometheus sobre un registry dedicado.
    - Exponer funciones chicas y estables para registrar eventos y duraciones.
    - Mantener baja la cardinalidad (sin emails ni ids en labels).
    - Armar la respuesta de /metrics.

Colaboradores:
    - crosscutting.middleware: latencia y conteo de requests HTTP.
    - application/usecases/booking: alta de reservas, confirmación de pagos.
    - application/usecases (workflows de dos pasos): fallas del follow-up.
===============================================================================
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

# ------------------------
# HTTP
# ------------------------
_requests_total = Counter(
    "decorbook_requests_total",
    "Total HTTP requests",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "decorbook_request_latency_seconds",
    "HTTP request latency (seconds)",
    ["endpoint", "method"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=_registry,
)

# ------------------------
# Workflow de reservas
# ------------------------
_bookings_created_total = Counter(
    "decorbook_bookings_created_total",
    "Bookings inserted, by creation path",
    ["source"],
    registry=_registry,
)

_payment_confirmations_total = Counter(
    "decorbook_payment_confirmations_total",
    "Payment confirmation outcomes",
    ["outcome"],
    registry=_registry,
)

_workflow_followup_failures_total = Counter(
    "decorbook_workflow_followup_failures_total",
    "Follow-up writes that failed after retries",
    ["step"],
    registry=_registry,
)

_OBJECT_ID_RE = re.compile(r"/[0-9a-f]{24}(?=/|$)", re.IGNORECASE)


def record_request_metrics(
    endpoint: str, method: str, status_code: int, latency_seconds: float
) -> None:
    normalized = _normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized, method=method, status=_status_bucket(status_code)
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_booking_created(source: str) -> None:
    _bookings_created_total.labels(source=source).inc()


def record_payment_confirmation(outcome: str) -> None:
    _payment_confirmations_total.labels(outcome=outcome).inc()


def record_followup_failure(step: str) -> None:
    _workflow_followup_failures_total.labels(step=step).inc()


def _normalize_endpoint(path: str) -> str:
    """Colapsa ids en los paths para acotar la cardinalidad de labels.

    Los ObjectIds pasan a `{id}`; el transaction id libre después de
    `/bookings/cancel/` pasa a `{transaction_id}`.
    """
    path = re.sub(
        r"^/bookings/cancel/[^/]+", "/bookings/cancel/{transaction_id}", path
    )
    path = re.sub(
        r"^/decorator-requests/(approve|reject)/[^/]+",
        r"/decorator-requests/\1/{id}",
        path,
    )
    return _OBJECT_ID_RE.sub("/{id}", path)


def _status_bucket(code: int) -> str:
    if code < 400:
        return str(code)
    return f"{code // 100}xx" if code >= 500 else str(code)


def get_metrics_response() -> tuple[bytes, str]:
    """Body y content type para /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST
