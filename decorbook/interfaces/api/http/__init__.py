"""Adaptadores HTTP: routers, schemas y mapeo de errores."""
