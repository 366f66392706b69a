from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class ProviderPayload(BaseModel):
    """Тело POST/PUT /providers. id_user и registration_date выставляются сервером."""
    id: Optional[int] = None
    company_name: Optional[str] = Field(None, max_length=255)
    siret: Optional[str] = Field(None, pattern=r"^\d{14}$")
    phone: Optional[str] = Field(None, max_length=30)
    city: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    activity_ids: List[int] = []

class ProviderRead(BaseModel):
    id: int
    id_user: int
    registration_date: date
    company_name: Optional[str] = None
    siret: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    activity_ids: List[int] = []

    class Config:
        from_attributes = True
