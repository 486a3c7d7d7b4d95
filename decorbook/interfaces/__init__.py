"""Adaptadores de interfaz (HTTP)."""
