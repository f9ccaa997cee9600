"""
Pydantic schemas for User authentication and registration.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
import re

from app.models.user import UserRole


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt limit
        description="Password must be 8-72 characters with at least one letter and one number"
    )
    role: UserRole
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    avatar: Optional[str] = None
    resume: Optional[str] = None

    @field_validator('password')
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Validate password contains letters and digits."""
        if not re.search(r'[A-Za-z]', v):
            raise ValueError('Password must contain at least one letter')
        if not re.search(r'\d', v):
            raise ValueError('Password must contain at least one number')
        return v


class UserLoginRequest(BaseModel):
    """Request schema for user login."""
    email: EmailStr
    password: str


class UserUpdateRequest(BaseModel):
    """Profile fields a user may change on their own account."""
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    avatar: Optional[str] = None
    resume: Optional[str] = None
    company_name: Optional[str] = None
    company_logo: Optional[str] = None

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("name cannot be null")
        return v


class UserResponse(BaseModel):
    """User profile response (no sensitive data)."""
    id: int
    name: str
    email: str
    role: UserRole
    avatar: Optional[str] = None
    resume: Optional[str] = None
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """JWT token response."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class CompanySummary(BaseModel):
    """Employer fields embedded in job listings."""
    id: int
    name: str
    company_name: Optional[str] = None
    company_logo: Optional[str] = None

    class Config:
        from_attributes = True


class ApplicantSummary(BaseModel):
    """Job seeker fields shown to the employer reviewing applications."""
    id: int
    name: str
    email: str
    avatar: Optional[str] = None
    resume: Optional[str] = None

    class Config:
        from_attributes = True
