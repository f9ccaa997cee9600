import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user, require_role
from app.core.exceptions import ForbiddenError, NotFoundError
from app.crud import application as application_crud
from app.crud import job as job_crud
from app.crud import saved_job as saved_job_crud
from app.models.job import Job
from app.models.user import User, UserRole
from app.schemas.job import (
    EmployerJobResponse,
    JobCreateRequest,
    JobDetailResponse,
    JobListItem,
    JobResponse,
    JobUpdateRequest,
    MessageResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)

employer_only = require_role(UserRole.EMPLOYER, "Only employers can post jobs")


def get_owned_job(job_id: int, db: Session, user: User) -> Job:
    """
    Load a job the requester is allowed to modify.

    Raises:
        NotFoundError: Job does not exist
        ForbiddenError: Requester is not the job's employer
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")
    if job.company_id != user.id:
        logger.warning(f"User {user.id} denied access to job {job_id} owned by {job.company_id}")
        raise ForbiddenError("Not authorized")
    return job


@router.post("/", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    user: User = Depends(employer_only),
    db: Session = Depends(get_db)
):
    """Create a new job posting owned by the authenticated employer."""
    new_job = job_crud.create(db, request, company_id=user.id)
    logger.info(f"Created job {new_job.id}: {new_job.title} (employer {user.id})")
    return new_job


@router.get("/", response_model=list[JobListItem])
def list_jobs(
    keyword: Optional[str] = None,
    location: Optional[str] = None,
    category: Optional[str] = None,
    type: Optional[str] = None,
    min_salary: Optional[int] = None,
    max_salary: Optional[int] = None,
    user_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """
    List open jobs with optional filters.

    Args:
        keyword: Case-insensitive match on the title
        location: Case-insensitive match on the location
        category: Exact category
        type: Exact job type
        min_salary: Only jobs paying up to at least this much
        max_salary: Only jobs starting at or below this much
        user_id: Job seeker whose saved/applied state is added to each job
    """
    jobs = job_crud.get_multi(
        db,
        keyword=keyword,
        location=location,
        category=category,
        job_type=type,
        min_salary=min_salary,
        max_salary=max_salary,
    )

    saved_ids = set()
    status_map = {}
    if user_id is not None:
        saved_ids = saved_job_crud.saved_job_ids(db, user_id)
        status_map = application_crud.status_by_job(db, user_id)

    items = []
    for job in jobs:
        item = JobListItem.model_validate(job)
        item.is_saved = job.id in saved_ids
        item.application_status = status_map.get(job.id)
        items.append(item)
    return items


@router.get("/employer", response_model=list[EmployerJobResponse])
def list_employer_jobs(
    user: User = Depends(require_role(UserRole.EMPLOYER, "Access denied")),
    db: Session = Depends(get_db)
):
    """Jobs posted by the authenticated employer, with application counts."""
    jobs = job_crud.get_by_company(db, user.id)
    counts = job_crud.application_counts(db, [job.id for job in jobs])

    items = []
    for job in jobs:
        item = EmployerJobResponse.model_validate(job)
        item.application_count = counts.get(job.id, 0)
        items.append(item)
    return items


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, user_id: Optional[int] = None, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.

    When user_id is given, application_status holds that user's status for
    this job (null if they have not applied).
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")

    detail = JobDetailResponse.model_validate(job)
    if user_id is not None:
        application = application_crud.find_one(db, job_id=job.id, applicant_id=user_id)
        if application:
            detail.application_status = application.status
    return detail


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update fields of a job owned by the authenticated employer."""
    job = get_owned_job(job_id, db, user)
    updated = job_crud.update(db, job, request)
    logger.info(f"Updated job {job_id}")
    return updated


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Delete a job owned by the authenticated employer.

    Applications and saved jobs pointing at it are kept.
    """
    job = get_owned_job(job_id, db, user)
    job_crud.delete(db, job)
    logger.info(f"Deleted job {job_id}")
    return MessageResponse(message="Job deleted successfully")


@router.put("/{job_id}/toggle-close", response_model=MessageResponse)
def toggle_close_job(
    job_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Close an open job or reopen a closed one."""
    job = get_owned_job(job_id, db, user)
    job = job_crud.toggle_closed(db, job)
    state = "closed" if job.is_closed else "reopened"
    logger.info(f"Job {job_id} {state}")
    return MessageResponse(message=f"Job {state}")
