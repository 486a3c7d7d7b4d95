from .fake_payment_gateway import FakePaymentGateway
from .firebase_identity import FirebaseIdentityVerifier
from .jwt_identity import JwtIdentityVerifier
from .retry import create_retry_decorator, is_transient_error
from .stripe_gateway import StripePaymentGateway

__all__ = [
    "FakePaymentGateway",
    "StripePaymentGateway",
    "FirebaseIdentityVerifier",
    "JwtIdentityVerifier",
    "create_retry_decorator",
    "is_transient_error",
]
