"""
Top‑level package for the To-Do List API.

This file makes ``todo_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``todo_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
