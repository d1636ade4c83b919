"""Core Layer: pure logic, no IO, no FastAPI.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Everything here except identifiers.py is deterministic
"""
