from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class Job(Base):
    """
    Job posting owned by one employer (company_id).

    Deleting a job does not touch applications or saved jobs that reference
    it; those rows keep the dangling job_id.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    requirements = Column(String, nullable=True)
    location = Column(String, nullable=True)
    category = Column(String, nullable=True, index=True)
    type = Column(String, nullable=True, index=True)  # Full-Time, Part-Time, Remote, ...
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)

    is_closed = Column(Boolean, default=False, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    company = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', company_id={self.company_id})>"
