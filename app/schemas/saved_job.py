from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from app.schemas.job import JobSummary


class SavedJobResponse(BaseModel):
    id: int
    job_id: int
    jobseeker_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SavedJobDetailResponse(SavedJobResponse):
    """Saved job with the job expanded (null once the job is deleted)."""
    job: Optional[JobSummary] = None
