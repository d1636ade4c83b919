"""API Layer: FastAPI routes, router constructor and error handlers.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every non-2xx response carries the {"error": {"type", "message"}} envelope
"""
