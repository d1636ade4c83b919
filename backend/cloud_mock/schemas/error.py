"""Error Schemas: documents the envelope shared by every non-2xx response."""

from typing import Literal

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    type: Literal["api_error"] = "api_error"
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
