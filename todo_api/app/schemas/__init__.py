"""
Pydantic schema definitions.

Schemas describe the data handled by the service layer.  The HTTP
layer exchanges plain text, so the models here are internal rather
than request or response bodies.
"""
