"""
Photostore API package.

Provides the FastAPI application for the Photostore service. The ASGI
entry point is ``api.app:app``.
"""
