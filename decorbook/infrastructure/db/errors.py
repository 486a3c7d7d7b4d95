"""
===============================================================================
CRC CARD — infrastructure/db/errors.py
===============================================================================

Componente:
  Errores tipados del ciclo de vida del cliente

Responsabilidades:
  - Evitar RuntimeError genéricos.
  - Dar semántica clara: "no inicializado", "ya inicializado".
===============================================================================
"""


class DatabaseClientError(Exception):
    """Base de errores del ciclo de vida del cliente MongoDB."""


class ClientAlreadyInitializedError(DatabaseClientError):
    """Se llamó a init_client() más de una vez."""


class ClientNotInitializedError(DatabaseClientError):
    """Se usó el cliente sin init_client()."""
