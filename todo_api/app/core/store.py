"""
In-memory storage for to-do items.

``ToDoStore`` keeps items in insertion order for the lifetime of the
process.  Items are only ever appended; nothing is removed or
reordered.  Reads return a snapshot copy so callers cannot change the
backing list.  Every access is serialised with a lock, so the store
stays consistent when it is shared with code running on other
threads, such as synchronous handlers in the server threadpool or
background workers.
"""

import threading
from typing import List

from todo_api.app.schemas.todo import ToDoItem


class ToDoStore:
    """Append-only, lock-guarded list of :class:`ToDoItem`."""

    def __init__(self) -> None:
        self._items: List[ToDoItem] = []
        self._lock = threading.Lock()

    def add(self, item: ToDoItem) -> None:
        """Append ``item`` to the end of the store."""
        with self._lock:
            self._items.append(item)

    def list(self) -> List[ToDoItem]:
        """Return all items in insertion order as a new list."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
