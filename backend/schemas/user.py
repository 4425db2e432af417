from pydantic import BaseModel, EmailStr, Field
from typing import Optional

# Shared properties for user models
class UserBase(BaseModel):
    email: EmailStr

# Schema for user authentication credentials; a malformed address simply fails to authenticate
class UserLogin(BaseModel):
    email: str
    password: str

# Schema for user registration requests
class UserCreate(UserBase):
    password: str = Field(min_length=1)
    name: str

# Public user details, the password hash never leaves the server
class UserResponse(UserBase):
    id: int
    name: Optional[str] = None

    class Config:
        from_attributes = True

# Response body of POST /api/register
class RegisterResponse(BaseModel):
    success: bool = True
    user: UserResponse

# Response body of POST /api/login
class LoginResponse(BaseModel):
    success: bool = True
    user: UserResponse
    access_token: str
    token_type: str = "bearer"

# Schema for JWT payload contents
class TokenData(BaseModel):
    email: Optional[str] = None
