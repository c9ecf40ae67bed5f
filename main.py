# main.py
"""ASGI entry point: `uvicorn main:app` or `gunicorn main:app -c gunicorn.conf.py`."""
from src.main import app

__all__ = ["app"]
