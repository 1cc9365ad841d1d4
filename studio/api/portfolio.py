"""
Portfolio endpoints.

Public listing plus the create/update/delete operations used by the admin
page. Deleting an unknown id still answers 204.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from studio.db import schemas
from studio.api.deps import get_store
from studio.storage import ContentStore

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=List[schemas.PortfolioItem])
def list_portfolio_endpoint(store: ContentStore = Depends(get_store)):
    return store.get_portfolio_items()


@router.post("", response_model=schemas.PortfolioItem, status_code=status.HTTP_201_CREATED)
def create_portfolio_item_endpoint(
    item: schemas.PortfolioItemCreate,
    store: ContentStore = Depends(get_store),
):
    return store.create_portfolio_item(item)


@router.put("/{item_id}", response_model=schemas.PortfolioItem)
@router.patch("/{item_id}", response_model=schemas.PortfolioItem)
def update_portfolio_item_endpoint(
    item_id: int,
    item: schemas.PortfolioItemUpdate,
    store: ContentStore = Depends(get_store),
):
    updated = store.update_portfolio_item(item_id, item)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Portfolio item not found")
    return updated


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_portfolio_item_endpoint(item_id: int, store: ContentStore = Depends(get_store)):
    store.delete_portfolio_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
