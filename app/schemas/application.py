from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.job import JobSummary
from app.schemas.user import ApplicantSummary


class ApplicationResponse(BaseModel):
    """Application record as stored."""
    id: int
    job_id: int
    applicant_id: int
    resume: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MyApplicationResponse(ApplicationResponse):
    """Job seeker's view: the application with the job it targets."""
    job: Optional[JobSummary] = None


class ApplicationDetailResponse(ApplicationResponse):
    """Employer or applicant view with both sides expanded."""
    job: Optional[JobSummary] = None
    applicant: Optional[ApplicantSummary] = None


class StatusUpdateRequest(BaseModel):
    """New status label for an application."""
    status: str = Field(..., min_length=1, max_length=50)

    @field_validator("status")
    @classmethod
    def reject_blank_status(cls, v: str) -> str:
        """Labels are stored exactly as sent; only blank ones are refused."""
        if not v.strip():
            raise ValueError("status cannot be blank")
        return v


class StatusUpdateResponse(BaseModel):
    message: str
    status: str
    application_id: int
