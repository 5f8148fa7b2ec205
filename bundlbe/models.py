"""Pydantic models for backend requests/responses and the persisted activation record."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ActivationRequest(BaseModel):
    """Request body for /login and /logout."""
    
    code: str = Field(..., description="User activation code")
    app_id: str = Field(..., description="Application identifier")
    device_id: str = Field(..., description="Device identifier")


class DuplicateRequest(BaseModel):
    """Request body for /subscription-duplicate."""
    
    code: str = Field(..., description="User activation code")
    app_id: str = Field(..., description="Application identifier")


class ActivationResponse(BaseModel):
    """
    Response of /login and /logout.
    
    Also the structured error body the backend sends with non-2xx statuses,
    and the value returned to callers on a cache hit.
    """
    
    model_config = ConfigDict(strict=True)
    
    paywall_suppress: bool = Field(..., description="Whether the paywall should be hidden")
    error: Optional[str] = Field(default=None, description="Optional error message returned by backend")


class DuplicateResponse(BaseModel):
    """Response of /subscription-duplicate."""
    
    model_config = ConfigDict(strict=True)
    
    success: Optional[bool] = Field(default=None, description="Whether the duplicate notification was recorded")
    error: Optional[str] = Field(default=None, description="Optional error message returned by backend")


@dataclass
class ActivationRecord:
    """Locally persisted activation state."""
    last_verified_at: Optional[datetime]
    paywall_suppressed: bool = False
