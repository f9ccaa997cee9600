"""
Database models package.
"""

from app.models.user import User, UserRole
from app.models.job import Job
from app.models.application import Application, ApplicationStatus
from app.models.saved_job import SavedJob

__all__ = ["User", "UserRole", "Job", "Application", "ApplicationStatus", "SavedJob"]
