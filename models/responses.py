"""
Pydantic models for API responses
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ResearchResult(BaseModel):
    """Hiring footprint of one company, serialized with camelCase keys"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    company_name: str = Field(..., alias="companyName")
    website: str
    ats_detected: str = Field(..., alias="atsDetected")
    live_roles: Optional[int] = Field(default=None, alias="liveRoles", ge=0)
    linkedin_search_url: str = Field(..., alias="linkedinSearchUrl")
    careers_url: Optional[str] = Field(default=None, alias="careersUrl")


class ErrorResponse(BaseModel):
    """Error payload returned for invalid input or unexpected failures"""
    error: str
