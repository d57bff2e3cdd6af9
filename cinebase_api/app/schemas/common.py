"""
Schemas shared by several endpoints.
"""

from typing import Dict

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response.

    Besides ``error`` the body carries contextual fields such as the
    offending id or the conflicting record.
    """

    error: str = Field(..., example="Movie not found")

    model_config = {
        "extra": "allow",
    }


class Welcome(BaseModel):
    message: str
    endpoints: Dict[str, str]
