"""
CRUD operations for SavedJob model.
"""

from typing import List, Optional, Set
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.exceptions import ConflictError
from app.models.saved_job import SavedJob


def create(db: Session, job_id: int, jobseeker_id: int) -> SavedJob:
    """
    Save a job for a job seeker.

    Raises:
        ConflictError: If the job is already saved (including a concurrent insert)
    """
    saved = SavedJob(job_id=job_id, jobseeker_id=jobseeker_id)

    db.add(saved)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Already saved")
    db.refresh(saved)

    return saved


def find_one(db: Session, job_id: int, jobseeker_id: int) -> Optional[SavedJob]:
    return (
        db.query(SavedJob)
        .filter(SavedJob.job_id == job_id, SavedJob.jobseeker_id == jobseeker_id)
        .first()
    )


def get_by_jobseeker(db: Session, jobseeker_id: int) -> List[SavedJob]:
    """Saved jobs of one job seeker, most recently saved first."""
    return (
        db.query(SavedJob)
        .filter(SavedJob.jobseeker_id == jobseeker_id)
        .order_by(SavedJob.created_at.desc(), SavedJob.id.desc())
        .all()
    )


def saved_job_ids(db: Session, jobseeker_id: int) -> Set[int]:
    rows = db.query(SavedJob.job_id).filter(SavedJob.jobseeker_id == jobseeker_id).all()
    return {job_id for (job_id,) in rows}


def delete(db: Session, saved: SavedJob) -> None:
    db.delete(saved)
    db.commit()
