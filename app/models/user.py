"""
User model for authentication and role-based access.

Each User is either an employer (posts jobs, reviews applications) or a
job seeker (saves jobs, applies). Ownership checks across the API compare
the authenticated user's id to the owner/applicant columns of other records.
"""

import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, func
from app.core.database import Base


class UserRole(str, enum.Enum):
    """Account role, fixed at registration."""
    EMPLOYER = "employer"
    JOBSEEKER = "jobseeker"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole, values_callable=lambda e: [m.value for m in e], name="user_role"), nullable=False)

    # Profile
    name = Column(String, nullable=False)
    avatar = Column(String, nullable=True)
    resume = Column(String, nullable=True)  # URL of the seeker's current resume

    # Employer profile
    company_name = Column(String, nullable=True)
    company_logo = Column(String, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"
