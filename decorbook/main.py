"""
Name: ASGI Entrypoint (decorbook.main)

Responsibilities:
  - Re-export the FastAPI app for ASGI servers and tooling
    (`uvicorn decorbook.main:app`)

Notes:
  - No configuration or IO here.
"""

from decorbook.api.main import app

__all__ = ["app"]
