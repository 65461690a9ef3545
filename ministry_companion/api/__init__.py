"""HTTP API (FastAPI)"""
from .app import build_store, create_app

app = create_app()

__all__ = ["app", "create_app", "build_store"]
