"""
CRUD operations for Application model.
"""

from typing import Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.exceptions import ConflictError
from app.models.application import Application, ApplicationStatus


def create(db: Session, job_id: int, applicant_id: int, resume: Optional[str] = None) -> Application:
    """
    Create an application in the initial "In Review" status.

    The unique constraint on (job_id, applicant_id) catches the case where a
    concurrent request inserted the same pair after the caller's existence check.

    Raises:
        ConflictError: If the applicant already applied to this job
    """
    db_application = Application(
        job_id=job_id,
        applicant_id=applicant_id,
        resume=resume,
        status=ApplicationStatus.IN_REVIEW.value,
    )

    db.add(db_application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Already applied")
    db.refresh(db_application)

    return db_application


def get_by_id(db: Session, application_id: int) -> Optional[Application]:
    """Retrieve an application with its job and applicant loaded."""
    return db.query(Application).filter(Application.id == application_id).first()


def find_one(db: Session, **filters) -> Optional[Application]:
    """
    Retrieve the first application matching all equality filters.

    Example:
        find_one(db, job_id=3, applicant_id=7)
    """
    return db.query(Application).filter_by(**filters).first()


def get_by_applicant(db: Session, applicant_id: int) -> List[Application]:
    """Applications submitted by one job seeker, newest first."""
    return (
        db.query(Application)
        .filter(Application.applicant_id == applicant_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def get_by_job(db: Session, job_id: int) -> List[Application]:
    """Applications received for one job."""
    return (
        db.query(Application)
        .filter(Application.job_id == job_id)
        .order_by(Application.created_at.asc(), Application.id.asc())
        .all()
    )


def status_by_job(db: Session, applicant_id: int) -> Dict[int, str]:
    """Map of job id to this applicant's application status."""
    rows = (
        db.query(Application.job_id, Application.status)
        .filter(Application.applicant_id == applicant_id)
        .all()
    )
    return {job_id: status for job_id, status in rows}


def save(db: Session, application: Application) -> Application:
    """Persist changes made to a loaded application."""
    db.add(application)
    db.commit()
    db.refresh(application)
    return application


def delete(db: Session, application: Application) -> None:
    """Delete (withdraw) an application."""
    db.delete(application)
    db.commit()
