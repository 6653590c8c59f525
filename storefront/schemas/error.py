"""Error body shared by every failing response."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    message: str = Field(..., description="Human-readable reason; never internal details")
