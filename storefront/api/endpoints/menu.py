from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from storefront.api.dependencies import get_catalog_client, get_session_store
from storefront.integrations.contracts.interfaces import CatalogProvider
from storefront.presentation import render_order_failure, render_order_success
from storefront.session.store import SessionStore

router = APIRouter(prefix="/menu/sessions", tags=["Menu"])


class SelectCategoryRequest(BaseModel):
    category: str


class AddToCartRequest(BaseModel):
    item_id: str
    variation_id: str


class UpdateQuantityRequest(BaseModel):
    quantity: int


@router.post("")
async def create_menu_session(
    catalog: CatalogProvider = Depends(get_catalog_client),
    store: SessionStore = Depends(get_session_store),
):
    """Load the menu once and open an empty cart for it."""
    items = await catalog.list_items()
    session = store.create(items)
    return {"success": True, "data": session.view()}


@router.get("/{session_id}")
async def get_menu_session(
    session_id: str,
    category: Optional[str] = Query(None, description="Category label to filter this view by; does not change the selection"),
    store: SessionStore = Depends(get_session_store),
):
    session = store.get(session_id)
    return {"success": True, "data": session.view(category or None)}


@router.put("/{session_id}/category")
async def select_category(session_id: str, body: SelectCategoryRequest, store: SessionStore = Depends(get_session_store)):
    session = store.get(session_id)
    session.select_category(body.category)
    return {"success": True, "data": session.view()}


@router.post("/{session_id}/cart")
async def add_to_cart(session_id: str, body: AddToCartRequest, store: SessionStore = Depends(get_session_store)):
    session = store.get(session_id)
    session.add_to_cart(body.item_id, body.variation_id)
    return {"success": True, "data": session.view()}


@router.patch("/{session_id}/cart/{item_id}/{variation_id}")
async def update_quantity(
    session_id: str,
    item_id: str,
    variation_id: str,
    body: UpdateQuantityRequest,
    store: SessionStore = Depends(get_session_store),
):
    session = store.get(session_id)
    session.update_quantity(item_id, variation_id, body.quantity)
    return {"success": True, "data": session.view()}


@router.delete("/{session_id}/cart/{item_id}/{variation_id}")
async def remove_from_cart(
    session_id: str,
    item_id: str,
    variation_id: str,
    store: SessionStore = Depends(get_session_store),
):
    session = store.get(session_id)
    session.remove_from_cart(item_id, variation_id)
    return {"success": True, "data": session.view()}


@router.post("/{session_id}/checkout")
async def checkout(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = store.get(session_id)
    outcome = await session.place_order()

    if outcome.ok:
        return {
            "success": True,
            "data": {"view": render_order_success(outcome.result), "session": session.view()},
        }

    return {
        "success": False,
        "error": outcome.error,
        "data": {"view": render_order_failure(outcome.error), "session": session.view()},
    }


@router.post("/{session_id}/reset")
async def reset_order(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Back to the menu after a finished order ("Place Another Order")."""
    session = store.get(session_id)
    session.reset_order()
    return {"success": True, "data": session.view()}


@router.delete("/{session_id}")
async def end_menu_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    store.delete(session_id)
    return {"success": True, "message": "Session ended successfully"}
