"""
Pydantic model for a single to-do entry.

An item is created once by ``ToDoService.add`` and never changes
afterwards.  The ``modified`` field holds the creation time; the name
is kept for compatibility with the display format even though items
are never modified.
"""

from datetime import datetime

from pydantic import BaseModel


class ToDoItem(BaseModel):
    """A to-do entry with its text and creation timestamp."""

    text: str
    modified: datetime

    model_config = {
        "frozen": True,
    }
