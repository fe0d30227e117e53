"""
Top‑level router for version 1 of the API.

The to-do router defines its own paths (``/add``, ``/items``,
``/last``) so it is included without a prefix here; ``main`` decides
where the whole v1 router is mounted.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

router.include_router(todos.router, tags=["todos"])
