from pydantic import BaseModel, EmailStr, Field


class UserLogin(BaseModel):
    login: str
    password: str

class UserRegister(BaseModel):
    login: str = Field(..., min_length=1, max_length=50, pattern=r"^[_.@A-Za-z0-9-]+$")
    email: EmailStr
    password: str = Field(..., min_length=4, max_length=100)

class AuthResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str

class RefreshTokenRequest(BaseModel):
    refresh_token: str
