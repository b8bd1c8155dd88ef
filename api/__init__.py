"""
Standoff API package.

Provides the FastAPI application for the Standoff debate service.
The application itself lives in ``api.app`` (``api.app:app`` for uvicorn).
"""
