"""
FastAPI dependencies for authentication, authorization and mail delivery.

These dependencies are used to protect endpoints and extract user context.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import ForbiddenError
from app.core.security import decode_token
from app.crud import user as user_crud
from app.models.user import User, UserRole
from app.services.application_workflow import ApplicationStatusWorkflow
from app.services.email_service import MailClient, format_sender

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from JWT token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT
    3. Fetches the user from the database
    4. Ensures the user is active

    Raises:
        HTTPException 401: If token is missing/invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authorized, invalid or missing token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
        user_id = payload.get("sub")
        if user_id is None:
            raise credentials_exception
        user_id = int(user_id)
    except (JWTError, ValueError):
        raise credentials_exception

    user = user_crud.get_by_id(db, user_id)
    if user is None:
        raise credentials_exception

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive"
        )

    return user


def require_role(role: UserRole, message: str):
    """
    Build a dependency that only lets users with ``role`` through.

    Usage:
        @router.post("/jobs")
        def create_job(user: User = Depends(require_role(UserRole.EMPLOYER, "Only employers can post jobs"))):
            ...
    """
    async def dependency(user: User = Depends(get_current_user)) -> User:
        if user.role != role:
            raise ForbiddenError(message)
        return user

    return dependency


def get_mail_client(request: Request) -> MailClient:
    """Mail client created in the application lifespan."""
    return request.app.state.mail_client


def get_status_workflow(mail_client: MailClient = Depends(get_mail_client)) -> ApplicationStatusWorkflow:
    return ApplicationStatusWorkflow(
        mail_client=mail_client,
        sender=format_sender(settings),
        strict=settings.STRICT_APPLICATION_STATUS,
    )
