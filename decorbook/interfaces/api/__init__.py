"""Adaptadores de entrada de la API."""
