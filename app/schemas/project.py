from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class ActivityRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class ProjectRead(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    city: Optional[str] = None
    created_at: Optional[datetime] = None
    activity_ids: List[int] = []

    class Config:
        from_attributes = True
