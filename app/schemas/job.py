from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime

from app.schemas.user import CompanySummary


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_salary_range(self):
        """Reject ranges where the minimum exceeds the maximum."""
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salary_min cannot be greater than salary_max")
        return self


class JobUpdateRequest(BaseModel):
    """Partial update; only fields present in the request body are applied."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)
    is_closed: Optional[bool] = None

    @field_validator("title", "is_closed")
    @classmethod
    def reject_null(cls, v, info):
        """Fields may be omitted but not cleared."""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    company_id: int
    title: str
    description: Optional[str] = None
    requirements: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    is_closed: bool
    company: Optional[CompanySummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobListItem(JobResponse):
    """Public listing entry, with the viewer's saved/applied state."""
    is_saved: bool = False
    application_status: Optional[str] = None


class JobDetailResponse(JobResponse):
    """Single job, with the viewer's application status if known."""
    application_status: Optional[str] = None


class EmployerJobResponse(JobResponse):
    """Employer dashboard entry with the number of applications received."""
    application_count: int = 0


class JobSummary(BaseModel):
    """Job fields embedded in application and saved-job listings."""
    id: int
    title: str
    location: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None
    company_id: int
    company: Optional[CompanySummary] = None

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Short status message."""
    message: str
