"""
Pydantic schemas for analysis requests.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    """Request to analyze a website."""
    url: Optional[str] = Field(None, description="URL to analyze; scheme optional")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "example.com"
            }
        }
    )
