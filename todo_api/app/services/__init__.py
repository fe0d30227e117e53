"""
Service layer abstraction.

Services encapsulate business logic.  The HTTP handlers only talk to
``ToDoService`` so the in-memory store behind it can be swapped out
without changing the API.
"""
