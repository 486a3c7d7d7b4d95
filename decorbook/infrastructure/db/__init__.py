from .client import close_client, ensure_indexes, get_database, init_client, ping
from .errors import (
    ClientAlreadyInitializedError,
    ClientNotInitializedError,
    DatabaseClientError,
)

__all__ = [
    "init_client",
    "get_database",
    "close_client",
    "ping",
    "ensure_indexes",
    "DatabaseClientError",
    "ClientAlreadyInitializedError",
    "ClientNotInitializedError",
]
