"""Pydantic models for lead API responses."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PartialSubmitResponse(BaseModel):
    """Response from POST /api/submit-partial."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    lead_id: str = Field(..., alias="leadId", min_length=1)


class FormSubmitResponse(BaseModel):
    """Response from POST /api/submit-form."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    success: bool = False
    lead_id: Optional[str] = Field(default=None, alias="leadId")
    error: Optional[str] = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body returned with non-2xx responses."""

    model_config = ConfigDict(extra="allow")

    error: Optional[str] = None
