"""
Contact form endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from studio.db import schemas
from studio.api.deps import get_store
from studio.storage import ContentStore

router = APIRouter(tags=["contacts"])


@router.post("/contact", response_model=schemas.Contact, status_code=status.HTTP_201_CREATED)
def create_contact_endpoint(
    contact: schemas.ContactCreate,
    store: ContentStore = Depends(get_store),
):
    return store.create_contact(contact)


@router.get("/contacts", response_model=List[schemas.Contact])
def list_contacts_endpoint(store: ContentStore = Depends(get_store)):
    return store.get_contacts()
