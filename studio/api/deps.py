"""
API dependency helpers.

Resolves the content store the entry point attached to the application.
"""
from fastapi import Request

from studio.storage import ContentStore


def get_store(request: Request) -> ContentStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("No content store attached to the application")
    return store
