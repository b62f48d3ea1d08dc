"""
MyNotes Backend — Pydantic Response Schemas
=============================================

What:  Pydantic models defining the API contract.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI serializes route return values through these models.

Request bodies are raw text (see routes/notes.py), so there are no
request models here.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Wire representation of a note: {"id": <int>, "text": "<body>"}.
    Who:   Returned by list, get, create and update.

    Field order is part of the contract: id first, then text.
    """
    id: int = Field(description="Store-assigned note identifier")
    text: str = Field(description="Note body, returned exactly as submitted")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models: consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '7' was not found",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Configured note store backend: sql, memory")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
