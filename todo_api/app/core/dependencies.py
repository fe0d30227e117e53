"""
FastAPI dependencies shared by the endpoint modules.

The application factory stores the one ``ToDoService`` instance on
``app.state``; handlers receive it through ``get_todo_service`` rather
than importing a module-level singleton.
"""

from fastapi import Request

from todo_api.app.services.todo_service import ToDoService


def get_todo_service(request: Request) -> ToDoService:
    """Return the service instance attached to the running application."""
    return request.app.state.todo_service
