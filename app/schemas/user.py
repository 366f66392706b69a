from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class UserRead(BaseModel):
    id: int
    login: str
    email: EmailStr
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
