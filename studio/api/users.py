"""
User registration and login endpoints.

The store accepts duplicate usernames, so registration looks the name up
first and rejects it here.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from studio.db import schemas
from studio.api.deps import get_store
from studio.storage import ContentStore
from studio.utils.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/register", response_model=schemas.UserPublic, status_code=status.HTTP_201_CREATED)
def register_endpoint(user: schemas.UserCreate, store: ContentStore = Depends(get_store)):
    if store.get_user_by_username(user.username) is not None:
        raise HTTPException(status_code=400, detail="Username already exists")
    try:
        created = store.create_user(
            schemas.UserCreate(username=user.username, password=hash_password(user.password))
        )
    except IntegrityError:
        # Lost a race with a concurrent registration for the same name.
        raise HTTPException(status_code=400, detail="Username already exists")
    return created


@router.post("/login", response_model=schemas.UserPublic)
def login_endpoint(credentials: schemas.UserCreate, store: ContentStore = Depends(get_store)):
    user = store.get_user_by_username(credentials.username)
    if user is None or not verify_password(credentials.password, user.password):
        logger.warning("login_failed username=%s", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return user


@router.get("/users/{user_id}", response_model=schemas.UserPublic)
def get_user_endpoint(user_id: int, store: ContentStore = Depends(get_store)):
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
