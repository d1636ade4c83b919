"""Response Schemas: Pydantic models declaring every success and error body.

Invariants:
    - Field names match the wire format exactly (camelCase kept where the API uses it)
    - Models are used for serialization only; request bodies are decoded by core.payload
"""
