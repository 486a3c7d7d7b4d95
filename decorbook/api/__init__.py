"""Wiring de la aplicación: app FastAPI y exception handlers."""
