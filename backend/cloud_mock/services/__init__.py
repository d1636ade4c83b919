"""Service Layer: one handler module per API resource.

Invariants:
    - Handlers are synchronous and stateless: (validated input) -> response model
    - Handlers raise CloudMockError subclasses; they never build HTTP responses
    - Validation completes before any synthetic value is generated
"""
