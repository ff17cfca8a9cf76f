from pydantic import BaseModel, EmailStr
from typing import Optional


class Identity(BaseModel):
    id: str
    email: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    confirm_password: str


class RegisterResponse(BaseModel):
    user_id: str
    email: str
    message: str
