"""Entry point for the skynote FastAPI app."""
from skynote.app import create_app

__all__ = ["create_app"]
