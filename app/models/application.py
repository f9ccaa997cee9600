import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class ApplicationStatus(str, enum.Enum):
    """
    Recognized application status labels.

    The status column is a plain string: employers may store any label,
    but only these three produce an email notification.
    """
    IN_REVIEW = "In Review"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class Application(Base):
    """
    A job seeker's application to one job.

    At most one application exists per (job, applicant); the unique
    constraint backs the existence check done before insert.
    """
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    # No foreign key: deleting a job leaves this row pointing at nothing
    job_id = Column(Integer, nullable=False, index=True)
    applicant_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Snapshot of the applicant's resume at apply time
    resume = Column(String, nullable=True)

    status = Column(String, nullable=False, default=ApplicationStatus.IN_REVIEW.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    job = relationship(
        "Job",
        primaryjoin="foreign(Application.job_id) == Job.id",
        lazy="joined",
        viewonly=True,
    )
    applicant = relationship("User", lazy="joined")

    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_applicant"),
    )

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, applicant_id={self.applicant_id}, status='{self.status}')>"
