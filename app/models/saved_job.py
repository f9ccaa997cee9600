from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class SavedJob(Base):
    """Bookmark of a job by a job seeker, unique per (job, jobseeker)."""
    __tablename__ = "saved_jobs"

    id = Column(Integer, primary_key=True, index=True)
    # No foreign key: deleting a job leaves this row pointing at nothing
    job_id = Column(Integer, nullable=False, index=True)
    jobseeker_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    job = relationship(
        "Job",
        primaryjoin="foreign(SavedJob.job_id) == Job.id",
        lazy="joined",
        viewonly=True,
    )

    __table_args__ = (
        UniqueConstraint("job_id", "jobseeker_id", name="uq_saved_jobs_job_jobseeker"),
    )

    def __repr__(self):
        return f"<SavedJob(id={self.id}, job_id={self.job_id}, jobseeker_id={self.jobseeker_id})>"
