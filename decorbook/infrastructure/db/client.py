"""
===============================================================================
CRC CARD — infrastructure/db/client.py
===============================================================================

Componente:
  Cliente MongoDB (singleton)

Responsabilidades:
  - Inicializar, exponer y cerrar el MongoClient del proceso.
  - Fijar la Stable API (v1, strict, deprecation errors).
  - Hacer ping al deployment para readiness y el log de arranque.
  - Declarar los índices de los que dependen los repositorios.

Colaboradores:
  - pymongo.MongoClient
  - infrastructure/repositories/mongo/*

Principios:
  - Fail-fast (doble init, uso antes de init)
  - Un cliente por proceso (pymongo maneja el pool internamente)
===============================================================================
"""

from __future__ import annotations

import threading
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ...crosscutting.exceptions import DatabaseError
from ...crosscutting.logger import logger
from .errors import ClientAlreadyInitializedError, ClientNotInitializedError

USERS_COLLECTION = "users"
DECORATIONS_COLLECTION = "decorations"
BOOKINGS_COLLECTION = "bookings"
PROMOTION_REQUESTS_COLLECTION = "decoratorRequests"

_client: Optional[MongoClient] = None
_db_name: Optional[str] = None
_client_lock = threading.Lock()


def init_client(uri: str, db_name: str, *, timeout_ms: int = 5000) -> MongoClient:
    """
    Crea el cliente (una vez por proceso).

    El driver conecta de forma lazy; ping() verifica la conectividad.
    """
    global _client, _db_name

    with _client_lock:
        if _client is not None:
            raise ClientAlreadyInitializedError("MongoDB client already initialized.")

        logger.info("Initializing MongoDB client", extra={"db_name": db_name})

        _client = MongoClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=timeout_ms,
            tz_aware=True,
        )
        _db_name = db_name
        return _client


def get_database() -> Database:
    """Handle de la base configurada."""
    if _client is None or _db_name is None:
        raise ClientNotInitializedError(
            "MongoDB client not initialized. Call init_client() first."
        )
    return _client[_db_name]


def close_client() -> None:
    """Cierra el cliente (idempotente)."""
    global _client, _db_name

    with _client_lock:
        if _client is not None:
            logger.info("Closing MongoDB client")
            try:
                _client.close()
            finally:
                _client = None
                _db_name = None


def ping() -> bool:
    """
    Ejecuta el comando admin ping.

    Devuelve False si el cliente no está inicializado o el servidor no
    responde; /readyz traduce False a 503.
    """
    if _client is None:
        return False
    try:
        _client.admin.command("ping")
    except PyMongoError as exc:
        logger.warning("MongoDB ping failed", extra={"error": str(exc)})
        return False
    return True


def ensure_indexes(db: Database) -> None:
    """
    Declara los índices de los que dependen los repositorios.

    bookings.transactionId es único (sparse: las reservas previas al pago
    no lo tienen).
    """
    try:
        db[BOOKINGS_COLLECTION].create_index(
            [("transactionId", ASCENDING)], unique=True, sparse=True
        )
        db[BOOKINGS_COLLECTION].create_index([("customer", ASCENDING)])
        db[BOOKINGS_COLLECTION].create_index([("assignedDecorator.email", ASCENDING)])
        db[USERS_COLLECTION].create_index([("email", ASCENDING)])
        db[PROMOTION_REQUESTS_COLLECTION].create_index([("email", ASCENDING)])
    except PyMongoError as exc:
        raise DatabaseError("Index creation failed", original_error=exc) from exc
