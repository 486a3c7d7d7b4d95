"""decorbook: backend del marketplace de reservas de decoración (FastAPI + MongoDB)."""

__version__ = "0.1.0"
