"""
Process entry point.

Builds the content store from environment settings and exposes the FastAPI
`app` for an ASGI server, e.g. ``uvicorn app:app``.
"""

from studio.api.main import create_app

app = create_app()
