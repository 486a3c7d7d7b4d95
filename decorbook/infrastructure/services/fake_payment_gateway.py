"""
Name: Fake Payment Gateway

Responsibilities:
  - Reemplazo in-memory del checkout hosteado (FAKE_PAYMENTS=1, tests)
  - Ids de sesión y URLs determinísticos
  - complete_session() simula que el cliente paga
"""

from __future__ import annotations

import itertools
from dataclasses import replace
from threading import Lock
from typing import Dict, Optional

from ...domain.value_objects import (
    SESSION_STATUS_COMPLETE,
    CheckoutRequest,
    CheckoutSession,
)

FAKE_CHECKOUT_BASE_URL = "https://checkout.fake.local/pay"


class FakePaymentGateway:
    def __init__(self) -> None:
        self._lock = Lock()
        self._sessions: Dict[str, CheckoutSession] = {}
        self._counter = itertools.count(1)

    def create_checkout_session(self, request: CheckoutRequest) -> str:
        with self._lock:
            n = next(self._counter)
            session_id = f"cs_test_{n:06d}"
            self._sessions[session_id] = CheckoutSession(
                id=session_id,
                status="open",
                payment_intent=None,
                amount_total=request.unit_amount_minor * request.quantity,
                customer_email=request.customer_email,
                metadata=request.metadata(),
            )
        return f"{FAKE_CHECKOUT_BASE_URL}/{session_id}"

    def retrieve_session(self, session_id: str) -> Optional[CheckoutSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def complete_session(self, session_id: str) -> CheckoutSession:
        """Marca la sesión como pagada y le asigna un payment intent id."""
        with self._lock:
            session = self._sessions[session_id]
            completed = replace(
                session,
                status=SESSION_STATUS_COMPLETE,
                payment_intent=session.payment_intent
                or f"pi_test_{session_id.rsplit('_', 1)[-1]}",
            )
            self._sessions[session_id] = completed
            return completed
