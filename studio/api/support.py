"""
Build information endpoint.
"""
import os

from fastapi import APIRouter, Depends

from studio.api.deps import get_store
from studio.storage import ContentStore

router = APIRouter(tags=["support"])


@router.get("/build-info")
def get_build_info(store: ContentStore = Depends(get_store)):
    """Return build metadata and the active storage backend."""
    build_sha = os.getenv("BUILD_SHA")
    return {
        "build_sha": build_sha if build_sha else None,
        "service_name": "studio-service",
        "version": os.getenv("VERSION", "unknown"),
        "storage_backend": store.backend_name,
    }
