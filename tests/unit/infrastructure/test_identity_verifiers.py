"""
Name: Identity Verifier Tests

Responsibilities:
  - HS256 verifier: issue/verify, expiry, wrong secret, missing email
  - Firebase verifier: bad token vs provider failure, service key decoding

Notes:
  - firebase_admin is patched; no credentials or network needed
"""

import base64
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import jwt
import pytest
from firebase_admin import auth as fb_auth

from decorbook.crosscutting.exceptions import IdentityProviderError
from decorbook.domain.services import TokenVerificationError
from decorbook.infrastructure.services import (
    FirebaseIdentityVerifier,
    JwtIdentityVerifier,
)
from decorbook.infrastructure.services.firebase_identity import decode_service_key

pytestmark = pytest.mark.unit

SECRET = "unit-test-secret-0123456789abcdef"
FIREBASE = "decorbook.infrastructure.services.firebase_identity"


class TestJwtVerifier:
    def test_issue_then_verify(self):
        verifier = JwtIdentityVerifier(SECRET)

        principal = verifier.verify(verifier.issue_token("a@example.com", uid="u1"))

        assert principal.email == "a@example.com"
        assert principal.uid == "u1"

    def test_expired_token(self):
        verifier = JwtIdentityVerifier(SECRET, ttl_minutes=-1)

        with pytest.raises(TokenVerificationError, match="expired"):
            verifier.verify(verifier.issue_token("a@example.com"))

    def test_wrong_secret(self):
        token = JwtIdentityVerifier("another-secret-0123456789abcdef").issue_token(
            "a@example.com"
        )

        with pytest.raises(TokenVerificationError):
            JwtIdentityVerifier(SECRET).verify(token)

    def test_email_claim_required(self):
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"sub": "u1", "exp": exp}, SECRET, algorithm="HS256")

        with pytest.raises(TokenVerificationError):
            JwtIdentityVerifier(SECRET).verify(token)

    def test_garbage_token(self):
        with pytest.raises(TokenVerificationError):
            JwtIdentityVerifier(SECRET).verify("not.a.token")


class TestFirebaseVerifier:
    def _verifier(self) -> FirebaseIdentityVerifier:
        with patch(f"{FIREBASE}._get_or_init_app", return_value=MagicMock()):
            return FirebaseIdentityVerifier("ignored")

    def test_verified_token(self):
        with patch(f"{FIREBASE}.auth.verify_id_token") as verify:
            verify.return_value = {"email": "a@example.com", "uid": "fb-1"}

            principal = self._verifier().verify("id-token")

        assert principal.email == "a@example.com"
        assert principal.uid == "fb-1"

    def test_invalid_token(self):
        with patch(f"{FIREBASE}.auth.verify_id_token") as verify:
            verify.side_effect = fb_auth.InvalidIdTokenError("bad token")

            with pytest.raises(TokenVerificationError):
                self._verifier().verify("id-token")

    def test_empty_token(self):
        with patch(f"{FIREBASE}.auth.verify_id_token") as verify:
            verify.side_effect = ValueError("Illegal ID token provided")

            with pytest.raises(TokenVerificationError):
                self._verifier().verify("")

    def test_token_without_email(self):
        with patch(f"{FIREBASE}.auth.verify_id_token") as verify:
            verify.return_value = {"uid": "fb-1"}

            with pytest.raises(TokenVerificationError):
                self._verifier().verify("id-token")

    def test_key_fetch_failure_is_provider_error(self):
        with patch(f"{FIREBASE}.auth.verify_id_token") as verify:
            verify.side_effect = fb_auth.CertificateFetchError("down", cause=None)

            with pytest.raises(IdentityProviderError):
                self._verifier().verify("id-token")


class TestServiceKey:
    def test_decode_service_key(self):
        raw = {"type": "service_account", "project_id": "decorbook"}
        encoded = base64.b64encode(json.dumps(raw).encode()).decode()

        assert decode_service_key(encoded) == raw

    def test_decode_invalid_service_key(self):
        with pytest.raises(IdentityProviderError):
            decode_service_key("%%% not base64 %%%")
