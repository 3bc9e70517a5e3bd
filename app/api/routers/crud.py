from typing import Type

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from app.core.state import AppState, get_state


def crud_router(
    resource: str, tag: str, payload_model: Type[BaseModel], noun: str
) -> APIRouter:
    """Create/list/get/update/delete routes for one resource.

    ``resource`` is both the path segment under /api and the AppState
    attribute holding the handler.
    """
    router = APIRouter(prefix=f"/api/{resource}", tags=[tag])

    def handler(state: AppState = Depends(get_state)):
        return getattr(state, resource)

    @router.post("", status_code=201, summary=f"Add a new {noun}")
    def create_item(payload: payload_model, h=Depends(handler)):
        return h.create(payload)

    @router.get("", summary=f"Get all {tag.lower()}")
    def list_items(h=Depends(handler)):
        return h.list_all()

    @router.get("/{item_id}", summary=f"Get {noun} by ID")
    def get_item(item_id: str, h=Depends(handler)):
        return h.get(item_id)

    @router.put("/{item_id}", summary=f"Update a {noun}")
    def update_item(
        item_id: str, payload: payload_model = Body(None), h=Depends(handler)
    ):
        # A missing body is an empty update
        return h.update(item_id, payload or payload_model())

    @router.delete("/{item_id}", summary=f"Delete a {noun}")
    def delete_item(item_id: str, h=Depends(handler)):
        return h.delete(item_id)

    return router
