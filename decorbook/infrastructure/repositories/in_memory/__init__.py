from .booking_repo import InMemoryBookingRepository
from .decoration_repo import InMemoryDecorationRepository
from .promotion_request_repo import InMemoryPromotionRequestRepository
from .user_repo import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryDecorationRepository",
    "InMemoryBookingRepository",
    "InMemoryPromotionRequestRepository",
]
