"""
Name: JWT Identity Verifier (HS256)

Responsibilities:
  - Verificar bearer tokens HS256 firmados localmente (desarrollo / tests)
  - Exigir los claims email y exp
  - issue_token() para emitir tokens a clientes locales y tests
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from ...domain.services import TokenVerificationError
from ...domain.value_objects import Principal

JWT_ALGORITHM = "HS256"
CLAIM_SUB = "sub"
CLAIM_EMAIL = "email"
CLAIM_IAT = "iat"
CLAIM_EXP = "exp"


class JwtIdentityVerifier:
    def __init__(self, secret: str, *, ttl_minutes: int = 60) -> None:
        self._secret = secret
        self._ttl_minutes = ttl_minutes

    def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": [CLAIM_EMAIL, CLAIM_EXP]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenVerificationError("token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenVerificationError("invalid token") from exc

        email = payload.get(CLAIM_EMAIL)
        if not email:
            raise TokenVerificationError("invalid token")
        sub = payload.get(CLAIM_SUB)
        return Principal(email=str(email), uid=str(sub) if sub else None)

    def issue_token(self, email: str, *, uid: str | None = None) -> str:
        """Crea un token firmado para email, válido por el TTL configurado."""
        now = datetime.now(timezone.utc)
        payload: dict[str, object] = {
            CLAIM_SUB: uid or email,
            CLAIM_EMAIL: email,
            CLAIM_IAT: int(now.timestamp()),
            CLAIM_EXP: int((now + timedelta(minutes=self._ttl_minutes)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
