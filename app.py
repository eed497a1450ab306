# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
"""

from devops_demo.main import app  # re-export FastAPI instance

__all__ = ["app"]
