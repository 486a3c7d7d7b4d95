"""
Name: Firebase Identity Verifier

Responsibilities:
  - Inicializar firebase-admin desde FB_SERVICE_KEY (JSON en base64)
  - Verificar ID tokens de Firebase y devolver el Principal (email, uid)
  - Separar "token inválido" (TokenVerificationError -> 401) de caídas o
    mala configuración del proveedor (IdentityProviderError -> 500)
"""

from __future__ import annotations

import base64
import binascii
import json
import threading

import firebase_admin
from firebase_admin import auth, credentials

from ...crosscutting.exceptions import IdentityProviderError
from ...crosscutting.logger import logger
from ...domain.services import TokenVerificationError
from ...domain.value_objects import Principal

_init_lock = threading.Lock()


def decode_service_key(encoded: str) -> dict:
    """Decodifica el JSON de service account en base64."""
    try:
        return json.loads(base64.b64decode(encoded).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise IdentityProviderError(
            "FB_SERVICE_KEY is not valid base64-encoded JSON", original_error=exc
        ) from exc


def _get_or_init_app(service_key: str) -> firebase_admin.App:
    with _init_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            cred = credentials.Certificate(decode_service_key(service_key))
            logger.info("Initializing firebase-admin app")
            return firebase_admin.initialize_app(cred)


class FirebaseIdentityVerifier:
    """IdentityVerifier adapter over firebase_admin.auth.verify_id_token."""

    def __init__(self, service_key: str) -> None:
        self._app = _get_or_init_app(service_key)

    def verify(self, token: str) -> Principal:
        try:
            decoded = auth.verify_id_token(token, app=self._app)
        except (
            auth.InvalidIdTokenError,
            auth.ExpiredIdTokenError,
            auth.RevokedIdTokenError,
            auth.UserDisabledError,
        ) as exc:
            raise TokenVerificationError(str(exc)) from exc
        except ValueError as exc:
            # Token vacío o que no es string.
            raise TokenVerificationError(str(exc)) from exc
        except auth.CertificateFetchError as exc:
            raise IdentityProviderError(
                "Could not fetch Firebase public keys", original_error=exc
            ) from exc

        email = decoded.get("email")
        if not email:
            raise TokenVerificationError("token carries no email claim")
        return Principal(email=email, uid=decoded.get("uid"))
