import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user, require_role
from app.core.exceptions import ConflictError, NotFoundError
from app.crud import job as job_crud
from app.crud import saved_job as saved_job_crud
from app.models.user import User, UserRole
from app.schemas.job import MessageResponse
from app.schemas.saved_job import SavedJobDetailResponse, SavedJobResponse

router = APIRouter(prefix="/saved-jobs", tags=["Saved Jobs"])
logger = logging.getLogger(__name__)


@router.post("/{job_id}", status_code=201, response_model=SavedJobResponse)
def save_job(
    job_id: int,
    user: User = Depends(require_role(UserRole.JOBSEEKER, "Only job seekers can save jobs")),
    db: Session = Depends(get_db)
):
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise NotFoundError("Job not found")

    if saved_job_crud.find_one(db, job_id=job.id, jobseeker_id=user.id):
        raise ConflictError("Already saved")

    saved = saved_job_crud.create(db, job_id=job.id, jobseeker_id=user.id)
    logger.info(f"User {user.id} saved job {job.id}")
    return saved


@router.get("/my", response_model=list[SavedJobDetailResponse])
def list_my_saved_jobs(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return saved_job_crud.get_by_jobseeker(db, user.id)


@router.delete("/{job_id}", response_model=MessageResponse)
def unsave_job(
    job_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    saved = saved_job_crud.find_one(db, job_id=job_id, jobseeker_id=user.id)
    if not saved:
        raise NotFoundError("Not saved")

    saved_job_crud.delete(db, saved)
    logger.info(f"User {user.id} unsaved job {job_id}")
    return MessageResponse(message="Job unsaved")
