"""
Application package initializer.

The project is split into a storage layer (``core.store``), a service
layer that stamps and formats to-do items (``services``) and a thin
HTTP layer (``api/v1``) that routes plain query-string requests to the
service.  Versioning is handled by grouping routers under the
``api/<version>/`` hierarchy.
"""

from .main import app, create_app  # noqa: F401
