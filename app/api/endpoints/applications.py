"""
Application endpoints.

Job seekers apply to and withdraw from jobs; employers review the
applications received for their jobs and change their status.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user, get_status_workflow, require_role
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from app.crud import application as application_crud
from app.crud import job as job_crud
from app.models.user import User, UserRole
from app.schemas.application import (
    ApplicationDetailResponse,
    ApplicationResponse,
    MyApplicationResponse,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from app.schemas.job import MessageResponse
from app.services.application_workflow import ApplicationStatusWorkflow

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("/{job_id}", status_code=201, response_model=ApplicationResponse)
def apply_to_job(
    job_id: int,
    user: User = Depends(require_role(UserRole.JOBSEEKER, "Only job seekers can apply")),
    db: Session = Depends(get_db)
):
    """
    Apply to a job with the resume currently on the seeker's profile.

    The application starts in the "In Review" status.
    """
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")

    if application_crud.find_one(db, job_id=job.id, applicant_id=user.id):
        raise ConflictError("Already applied")

    application = application_crud.create(db, job_id=job.id, applicant_id=user.id, resume=user.resume)
    logger.info(f"User {user.id} applied to job {job.id} (application {application.id})")
    return application


@router.get("/my", response_model=list[MyApplicationResponse])
def list_my_applications(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Applications of the authenticated user, newest first."""
    return application_crud.get_by_applicant(db, user.id)


@router.get("/job/{job_id}", response_model=list[ApplicationDetailResponse])
def list_applicants_for_job(
    job_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """All applications received for a job owned by the authenticated employer."""
    job = job_crud.get_by_id(db, job_id)
    if not job or job.company_id != user.id:
        raise ForbiddenError("Not authorized to view applicants")

    return application_crud.get_by_job(db, job.id)


@router.get("/{application_id}", response_model=ApplicationDetailResponse)
def get_application(
    application_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """An application, visible to its applicant and to the job's employer."""
    application = application_crud.get_by_id(db, application_id)
    if not application:
        raise NotFoundError("Application not found.")

    is_applicant = application.applicant_id == user.id
    is_employer = application.job is not None and application.job.company_id == user.id
    if not (is_applicant or is_employer):
        raise ForbiddenError("Not authorized to view this application")

    return application


@router.put("/{application_id}/status", response_model=StatusUpdateResponse)
def update_application_status(
    application_id: int,
    request: StatusUpdateRequest,
    user: User = Depends(get_current_user),
    workflow: ApplicationStatusWorkflow = Depends(get_status_workflow),
    db: Session = Depends(get_db)
):
    """
    Change the status of an application and email the applicant.

    The response does not depend on whether the email was delivered.
    """
    result = workflow.update_status(db, application_id, user, request.status)
    return StatusUpdateResponse(
        message="Application status updated and email sent (if possible)",
        status=result.status,
        application_id=result.application.id,
    )


@router.delete("/{application_id}", response_model=MessageResponse)
def withdraw_application(
    application_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Withdraw one of the authenticated user's applications."""
    application = application_crud.find_one(db, id=application_id, applicant_id=user.id)
    if not application:
        raise NotFoundError("Application not found")

    application_crud.delete(db, application)
    logger.info(f"User {user.id} withdrew application {application_id}")
    return MessageResponse(message="Application withdrawn")
