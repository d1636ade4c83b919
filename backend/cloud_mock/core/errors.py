"""Error Hierarchy: client-input failures raised by request handlers.

Invariants:
    - Every error carries an HTTP status (non-2xx) and a human-readable message
    - to_response() produces the fixed envelope {"error": {"type", "message"}}
    - error type is always "api_error"
"""

ERROR_TYPE = "api_error"


def error_envelope(message: str) -> dict:
    """Build the error body shared by every non-2xx response."""
    return {"error": {"type": ERROR_TYPE, "message": message}}


class CloudMockError(Exception):
    """Base exception for all errors the mock reports to clients."""

    def __init__(self, message: str, http_status: int = 400):
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    def to_response(self) -> dict:
        return error_envelope(self.message)


# ─── Client Input Errors (400) ──────────────────────────────────

class InvalidPayloadError(CloudMockError):
    """Request body is not valid JSON (or not the expected JSON shape)."""
    def __init__(self):
        super().__init__("Invalid JSON payload", 400)


class MissingFieldError(CloudMockError):
    """A required body field or path identifier is absent or empty."""
    def __init__(self, field: str, message: str):
        super().__init__(message, 400)
        self.field = field
