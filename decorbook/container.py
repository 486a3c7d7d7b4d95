"""
===============================================================================
CRC CARD — decorbook/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer repositorios, gateways y casos de uso siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener los adapters pesados como singletons lazy (lru_cache).
  - Centralizar decisiones de runtime según Settings:
      * APP_ENV en {test, testing, ci} -> repositorios en memoria
      * FAKE_PAYMENTS=1 -> gateway de pagos en memoria
      * IDENTITY_PROVIDER -> verificador Firebase o JWT HS256

Colaboradores:
  - decorbook.crosscutting.config.get_settings
  - decorbook.domain (puertos)
  - decorbook.infrastructure (adapters)
  - decorbook.application.usecases

Notas:
  - Acá no hay lógica de negocio.
  - Acá no se importa FastAPI (solo factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    ApprovePromotionRequestUseCase,
    AssignDecoratorUseCase,
    CancelBookingUseCase,
    ConfirmPaymentUseCase,
    CreateBookingUseCase,
    CreateCheckoutSessionUseCase,
    CreateDecorationUseCase,
    DeleteDecorationUseCase,
    FindAvailableDecoratorsUseCase,
    GetDecorationUseCase,
    GetUserRoleUseCase,
    ListAssignedBookingsUseCase,
    ListCustomerBookingsUseCase,
    ListDecorationsUseCase,
    ListDecoratorsUseCase,
    ListPendingBookingsUseCase,
    ListPromotionRequestsUseCase,
    ListUsersUseCase,
    RejectPromotionRequestUseCase,
    RequestPromotionUseCase,
    UpdateBookingStatusUseCase,
    UpdateDecorationUseCase,
    UpdateUserRoleUseCase,
    UpsertUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import (
    BookingRepository,
    DecorationRepository,
    PromotionRequestRepository,
    UserRepository,
)
from .domain.services import IdentityVerifier, PaymentGateway
from .infrastructure.db import get_database
from .infrastructure.repositories import (
    InMemoryBookingRepository,
    InMemoryDecorationRepository,
    InMemoryPromotionRequestRepository,
    InMemoryUserRepository,
    MongoBookingRepository,
    MongoDecorationRepository,
    MongoPromotionRequestRepository,
    MongoUserRepository,
)
from .infrastructure.services import (
    FakePaymentGateway,
    FirebaseIdentityVerifier,
    JwtIdentityVerifier,
    StripePaymentGateway,
    create_retry_decorator,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    """app_env en {"test", "testing", "ci"} => adapters en memoria."""
    return get_settings().is_test()


# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    if _is_test_env():
        return InMemoryUserRepository()
    return MongoUserRepository(get_database())


@lru_cache(maxsize=1)
def get_decoration_repository() -> DecorationRepository:
    if _is_test_env():
        return InMemoryDecorationRepository()
    return MongoDecorationRepository(get_database())


@lru_cache(maxsize=1)
def get_booking_repository() -> BookingRepository:
    if _is_test_env():
        return InMemoryBookingRepository()
    return MongoBookingRepository(get_database())


@lru_cache(maxsize=1)
def get_promotion_request_repository() -> PromotionRequestRepository:
    if _is_test_env():
        return InMemoryPromotionRequestRepository()
    return MongoPromotionRequestRepository(get_database())


# =============================================================================
# Servicios externos (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_identity_verifier() -> IdentityVerifier:
    """ID tokens de Firebase en producción; JWT HS256 en local y en tests."""
    settings = get_settings()
    if settings.identity_provider == "jwt":
        return JwtIdentityVerifier(
            settings.jwt_secret, ttl_minutes=settings.jwt_access_ttl_minutes
        )
    return FirebaseIdentityVerifier(settings.fb_service_key)


@lru_cache(maxsize=1)
def get_payment_gateway() -> PaymentGateway:
    settings = get_settings()
    if settings.fake_payments:
        return FakePaymentGateway()
    return StripePaymentGateway(
        api_key=settings.stripe_secret_key,
        success_url=settings.stripe_success_url,
        cancel_url=settings.stripe_cancel_url,
        currency=settings.payment_currency,
    )


@lru_cache(maxsize=1)
def get_followup_retry():
    """Política de retry para la escritura follow-up de los workflows de dos pasos."""
    return create_retry_decorator()


# =============================================================================
# Casos de uso: usuarios
# =============================================================================


def get_upsert_user_use_case() -> UpsertUserUseCase:
    return UpsertUserUseCase(get_user_repository())


def get_user_role_use_case() -> GetUserRoleUseCase:
    return GetUserRoleUseCase(get_user_repository())


def get_update_user_role_use_case() -> UpdateUserRoleUseCase:
    return UpdateUserRoleUseCase(get_user_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(get_user_repository())


def get_list_decorators_use_case() -> ListDecoratorsUseCase:
    return ListDecoratorsUseCase(get_user_repository())


# =============================================================================
# Casos de uso: catálogo
# =============================================================================


def get_list_decorations_use_case() -> ListDecorationsUseCase:
    return ListDecorationsUseCase(get_decoration_repository())


def get_get_decoration_use_case() -> GetDecorationUseCase:
    return GetDecorationUseCase(get_decoration_repository())


def get_create_decoration_use_case() -> CreateDecorationUseCase:
    return CreateDecorationUseCase(get_decoration_repository())


def get_update_decoration_use_case() -> UpdateDecorationUseCase:
    return UpdateDecorationUseCase(get_decoration_repository())


def get_delete_decoration_use_case() -> DeleteDecorationUseCase:
    return DeleteDecorationUseCase(get_decoration_repository())


# =============================================================================
# Casos de uso: workflow de reservas
# =============================================================================


def get_create_booking_use_case() -> CreateBookingUseCase:
    return CreateBookingUseCase(get_booking_repository())


def get_create_checkout_session_use_case() -> CreateCheckoutSessionUseCase:
    return CreateCheckoutSessionUseCase(get_payment_gateway())


def get_confirm_payment_use_case() -> ConfirmPaymentUseCase:
    return ConfirmPaymentUseCase(
        payment_gateway=get_payment_gateway(),
        decoration_repository=get_decoration_repository(),
        booking_repository=get_booking_repository(),
    )


def get_assign_decorator_use_case() -> AssignDecoratorUseCase:
    return AssignDecoratorUseCase(
        get_booking_repository(),
        get_user_repository(),
        followup_retry=get_followup_retry(),
    )


def get_update_booking_status_use_case() -> UpdateBookingStatusUseCase:
    return UpdateBookingStatusUseCase(get_booking_repository())


def get_cancel_booking_use_case() -> CancelBookingUseCase:
    return CancelBookingUseCase(get_booking_repository())


def get_list_pending_bookings_use_case() -> ListPendingBookingsUseCase:
    return ListPendingBookingsUseCase(get_booking_repository())


def get_list_customer_bookings_use_case() -> ListCustomerBookingsUseCase:
    return ListCustomerBookingsUseCase(get_booking_repository())


def get_list_assigned_bookings_use_case() -> ListAssignedBookingsUseCase:
    return ListAssignedBookingsUseCase(get_booking_repository())


def get_find_available_decorators_use_case() -> FindAvailableDecoratorsUseCase:
    return FindAvailableDecoratorsUseCase(get_user_repository())


# =============================================================================
# Casos de uso: solicitudes de promoción
# =============================================================================


def get_request_promotion_use_case() -> RequestPromotionUseCase:
    return RequestPromotionUseCase(get_promotion_request_repository())


def get_approve_promotion_request_use_case() -> ApprovePromotionRequestUseCase:
    return ApprovePromotionRequestUseCase(
        get_promotion_request_repository(),
        get_user_repository(),
        followup_retry=get_followup_retry(),
    )


def get_reject_promotion_request_use_case() -> RejectPromotionRequestUseCase:
    return RejectPromotionRequestUseCase(get_promotion_request_repository())


def get_list_promotion_requests_use_case() -> ListPromotionRequestsUseCase:
    return ListPromotionRequestsUseCase(get_promotion_request_repository())


# =============================================================================
# Soporte para tests
# =============================================================================

_CACHED_FACTORIES = (
    get_user_repository,
    get_decoration_repository,
    get_booking_repository,
    get_promotion_request_repository,
    get_identity_verifier,
    get_payment_gateway,
    get_followup_retry,
)


def reset_container() -> None:
    """Descarta los singletons cacheados (stores en memoria nuevos por test)."""
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()
