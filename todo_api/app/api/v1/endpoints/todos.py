"""
To-do endpoints for API v1.

All three routes are plain ``GET`` requests that take their input from
the query string and answer with ``text/plain`` bodies:

* ``GET /add?text=...`` stores a new item and responds with 201 and an
  empty body, or 400 when ``text`` is missing.
* ``GET /items`` lists every item, one per line, in insertion order.
* ``GET /last`` returns the most recently modified item.

Both read endpoints answer ``No items`` when the store is empty.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from todo_api.app.core.dependencies import get_todo_service
from todo_api.app.services.todo_service import NO_ITEMS, ToDoService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/add",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
    summary="Add a to-do item",
)
async def add_item(
    text: Optional[List[str]] = Query(
        None,
        description="Text of the new item. An empty value is accepted; when repeated, the first value is used.",
    ),
    service: ToDoService = Depends(get_todo_service),
) -> PlainTextResponse:
    """Store a new item stamped with the current time.

    Only the presence of ``text`` is checked; ``/add?text=`` stores an
    item with empty text.  A repeated ``text`` keeps only its first value.
    """
    if not text:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing text parameter")
    first = text[0]
    logger.info("Adding item: %s", first)
    service.add(first)
    return PlainTextResponse("", status_code=status.HTTP_201_CREATED)


@router.get("/items", response_class=PlainTextResponse, summary="List all to-do items")
async def list_items(service: ToDoService = Depends(get_todo_service)) -> str:
    """Return all items joined by newlines, or ``No items``."""
    items = service.list()
    logger.info("Listing %d items", len(items))
    if not items:
        return NO_ITEMS
    return "\n".join(items)


@router.get("/last", response_class=PlainTextResponse, summary="Get the most recently modified item")
async def last_item(service: ToDoService = Depends(get_todo_service)) -> str:
    """Return the most recently modified item, or ``No items``."""
    logger.info("Fetching last item added")
    return service.last()
