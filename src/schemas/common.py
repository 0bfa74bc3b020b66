"""Common response schemas."""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Standard success response untuk operasi tanpa payload entity."""

    success: bool = True
    message: str
    data: Optional[Dict[str, Any]] = None
