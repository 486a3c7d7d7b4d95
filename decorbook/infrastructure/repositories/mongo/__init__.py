from .booking_repo import MongoBookingRepository
from .decoration_repo import MongoDecorationRepository
from .promotion_request_repo import MongoPromotionRequestRepository
from .user_repo import MongoUserRepository

__all__ = [
    "MongoUserRepository",
    "MongoDecorationRepository",
    "MongoBookingRepository",
    "MongoPromotionRequestRepository",
]
