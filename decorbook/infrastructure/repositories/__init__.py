"""
============================================================
TARJETA CRC
============================================================
Paquete: decorbook.infrastructure.repositories

Responsabilidades:
- Exponer los repositorios concretos (MongoDB e in-memory) desde un solo lugar.
- Mantener una superficie de import estable para container.py.

Colaboradores:
- Repositorios MongoDB (pymongo)
- Repositorios in-memory (tests / desarrollo local)
============================================================
"""

# Implementaciones in-memory: tests unitarios y APP_ENV=test. No persisten nada.
from .in_memory import (
    InMemoryBookingRepository,
    InMemoryDecorationRepository,
    InMemoryPromotionRequestRepository,
    InMemoryUserRepository,
)

# Implementaciones MongoDB: persistencia de producción.
from .mongo import (
    MongoBookingRepository,
    MongoDecorationRepository,
    MongoPromotionRequestRepository,
    MongoUserRepository,
)

__all__ = [
    # MongoDB
    "MongoUserRepository",
    "MongoDecorationRepository",
    "MongoBookingRepository",
    "MongoPromotionRequestRepository",
    # In-memory
    "InMemoryUserRepository",
    "InMemoryDecorationRepository",
    "InMemoryBookingRepository",
    "InMemoryPromotionRequestRepository",
]
