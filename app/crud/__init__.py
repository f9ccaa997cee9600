"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from app.crud import application, job, saved_job, user

__all__ = ["application", "job", "saved_job", "user"]
