"""
Pydantic models for API requests
"""

from pydantic import BaseModel, Field, StrictStr
from typing import Optional


class ResearchRequest(BaseModel):
    """Request model for /api/research endpoint"""
    url: Optional[StrictStr] = Field(
        default=None,
        description="Company website, with or without scheme",
        examples=["https://stripe.com"]
    )
