"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.core.exceptions import BadRequestError
from app.models.job import Job
from app.models.application import Application
from app.schemas.job import JobCreateRequest, JobUpdateRequest


def create(db: Session, job_data: JobCreateRequest, company_id: int) -> Job:
    """
    Create a new job owned by the given employer.

    Args:
        db: Database session
        job_data: Validated job creation data
        company_id: Id of the employer posting the job

    Returns:
        Created Job instance with id
    """
    db_job = Job(**job_data.model_dump(), company_id=company_id, is_closed=False)

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def get_multi(
    db: Session,
    keyword: Optional[str] = None,
    location: Optional[str] = None,
    category: Optional[str] = None,
    job_type: Optional[str] = None,
    min_salary: Optional[int] = None,
    max_salary: Optional[int] = None,
    include_closed: bool = False,
) -> List[Job]:
    """
    Retrieve jobs matching the listing filters.

    Args:
        db: Database session
        keyword: Case-insensitive substring of the title
        location: Case-insensitive substring of the location
        category: Exact category
        job_type: Exact job type
        min_salary: Keep jobs whose salary_max reaches at least this value
        max_salary: Keep jobs whose salary_min does not exceed this value
        include_closed: Also return closed jobs

    Returns:
        List of Job instances, newest first
    """
    query = db.query(Job)

    if not include_closed:
        query = query.filter(Job.is_closed.is_(False))
    if keyword:
        query = query.filter(Job.title.ilike(f"%{keyword}%"))
    if location:
        query = query.filter(Job.location.ilike(f"%{location}%"))
    if category:
        query = query.filter(Job.category == category)
    if job_type:
        query = query.filter(Job.type == job_type)
    if min_salary is not None:
        query = query.filter(Job.salary_max >= min_salary)
    if max_salary is not None:
        query = query.filter(Job.salary_min <= max_salary)

    return query.order_by(Job.created_at.desc(), Job.id.desc()).all()


def get_by_company(db: Session, company_id: int) -> List[Job]:
    """All jobs posted by one employer, open and closed."""
    return (
        db.query(Job)
        .filter(Job.company_id == company_id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )


def application_counts(db: Session, job_ids: List[int]) -> dict:
    """
    Count applications per job.

    Returns:
        Mapping of job id to application count (jobs without applications omitted)
    """
    if not job_ids:
        return {}
    rows = (
        db.query(Application.job_id, func.count(Application.id))
        .filter(Application.job_id.in_(job_ids))
        .group_by(Application.job_id)
        .all()
    )
    return {job_id: count for job_id, count in rows}


def update(db: Session, job: Job, job_data: JobUpdateRequest) -> Job:
    """
    Apply the fields present in the request to the job.

    Returns:
        Updated Job instance

    Raises:
        BadRequestError: If the resulting salary_min exceeds salary_max
    """
    changes = job_data.model_dump(exclude_unset=True)

    salary_min = changes.get("salary_min", job.salary_min)
    salary_max = changes.get("salary_max", job.salary_max)
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise BadRequestError("salary_min cannot be greater than salary_max")

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def toggle_closed(db: Session, job: Job) -> Job:
    """Flip the job between open and closed."""
    job.is_closed = not job.is_closed

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job: Job) -> None:
    """
    Delete a job.

    Applications and saved jobs referencing it are left in place.
    """
    db.delete(job)
    db.commit()
