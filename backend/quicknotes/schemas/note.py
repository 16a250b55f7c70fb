"""
QuickNotes Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between the UI and the backend.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate the OpenAPI documentation.

Schemas are separate from the SQLAlchemy model so the wire format stays
exactly `{id, title, content}` whatever columns the table grows later.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from quicknotes.models.note import TITLE_MAX_LENGTH

REQUIRED_FIELDS_MESSAGE = "Title and content are required"


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Body of POST /api/notes.

    Both fields are required and must contain something other than
    whitespace. The values are stored exactly as submitted.
    """
    title: str = Field(max_length=TITLE_MAX_LENGTH, description="Note title")
    content: str = Field(description="Note body text")

    @field_validator("title", "content")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Wire representation of a note.
    Who:   Items of GET /api/notes and the body of a 201 from POST /api/notes.
    """
    id: int = Field(description="Database-assigned note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body text")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. {"message": "Note deleted"}."""
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Human-readable description, safe to show to users
        code: Machine-readable error code (e.g. "validation_error", "not_found")
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {"error": "Invalid ID", "code": "validation_error", "request_id": "1a2b3c4d"}
    """
    error: str = Field(description="Human-readable error description")
    code: str = Field(description="Machine-readable error code")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected or disconnected")
    uptime_seconds: float = Field(description="Seconds since the service started")
