from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class QuotePayload(BaseModel):
    """Тело POST/PUT /quotes. provider_id не принимается: поставщик берётся из сессии."""
    id: Optional[int] = None
    file: str = Field(..., min_length=1, max_length=512)
    filename: Optional[str] = Field(None, max_length=255)
    project_id: int

class QuoteRead(BaseModel):
    id: int
    file: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    project_id: int
    provider_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
