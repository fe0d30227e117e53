"""
Service for adding, listing and inspecting to-do items.

``ToDoService`` owns a single :class:`ToDoStore`.  It stamps new items
with the current wall-clock time and renders items as
``"<timestamp> - <text>"`` strings for the plain-text API.  None of
the operations raise: an empty store is reported with the sentinel
text ``"No items"``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from todo_api.app.core.store import ToDoStore
from todo_api.app.schemas.todo import ToDoItem

logger = logging.getLogger(__name__)

NO_ITEMS = "No items"

# Rendered like ``Sun Oct 18 09:15:02 UTC 2026``.
DISPLAY_TIME_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def local_now() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


class ToDoService:
    """Business logic on top of the in-memory to-do store."""

    def __init__(
        self,
        store: Optional[ToDoStore] = None,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._store = store if store is not None else ToDoStore()
        self._clock = clock

    def add(self, text: str) -> ToDoItem:
        """Create an item stamped with the current time and store it.

        Empty text is accepted; only the presence of the parameter is
        checked, and that happens in the HTTP layer.
        """
        item = ToDoItem(text=text, modified=self._clock())
        self._store.add(item)
        logger.debug("Stored item #%d", len(self._store))
        return item

    def list(self) -> List[str]:
        """Return all items as display strings in insertion order."""
        return [self.format_for_display(item) for item in self._store.list()]

    def last(self) -> str:
        """Return the display string of the most recently modified item.

        When several items share the greatest timestamp the one
        inserted last wins.  Returns ``"No items"`` for an empty store.
        """
        items = self._store.list()
        if not items:
            return NO_ITEMS
        # max() keeps the first maximum it meets, so scan newest first.
        latest = max(reversed(items), key=lambda item: item.modified)
        return self.format_for_display(latest)

    @staticmethod
    def format_for_display(item: ToDoItem) -> str:
        return f"{item.modified.strftime(DISPLAY_TIME_FORMAT)} - {item.text}"
