"""Catalog item CRUD (productos)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_item_store, require_action
from app.core.policy import Action
from app.models import Item
from app.schemas.accounts import MessageResponse
from app.schemas.auth import Principal
from app.schemas.items import ItemCreate, ItemOut, ItemUpdate
from app.services.item_store import ItemStore

logger = logging.getLogger(__name__)
router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


@router.get("", response_model=list[ItemOut])
def list_items(
    _principal: Annotated[Principal, Depends(require_action(Action.READ_ITEM))],
    store: Annotated[ItemStore, Depends(get_item_store)],
) -> list[ItemOut]:
    return [ItemOut.model_validate(i) for i in store.list_all()]


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def post_item(
    body: ItemCreate,
    _admin: Annotated[Principal, Depends(require_action(Action.CREATE_ITEM))],
    store: Annotated[ItemStore, Depends(get_item_store)],
) -> ItemOut:
    item = store.save(Item(**body.model_dump()))
    logger.info("Product created", extra={"item_id": item.id})
    return ItemOut.model_validate(item)


@router.put("/{item_id}", response_model=ItemOut)
def put_item(
    item_id: str,
    body: ItemUpdate,
    _admin: Annotated[Principal, Depends(require_action(Action.UPDATE_ITEM))],
    store: Annotated[ItemStore, Depends(get_item_store)],
) -> ItemOut:
    """Partially update a product (admin only)."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    item = store.update(item_id, changes) if changes else store.find_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    return ItemOut.model_validate(item)


@router.delete("/{item_id}", response_model=MessageResponse)
def remove_item(
    item_id: str,
    _admin: Annotated[Principal, Depends(require_action(Action.DELETE_ITEM))],
    store: Annotated[ItemStore, Depends(get_item_store)],
) -> MessageResponse:
    if not store.delete(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)
    logger.info("Product deleted", extra={"item_id": item_id})
    return MessageResponse(message="Product deleted successfully")
