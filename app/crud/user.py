"""
CRUD operations for User model.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.core.security import get_password_hash
from app.models.user import User
from app.schemas.user import UserRegisterRequest, UserUpdateRequest


def create(db: Session, user_data: UserRegisterRequest) -> User:
    """Create a user with a hashed password."""
    fields = user_data.model_dump(exclude={"password"})
    db_user = User(**fields, hashed_password=get_password_hash(user_data.password), is_active=True)

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    return db_user


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def update(db: Session, user: User, user_data: UserUpdateRequest) -> User:
    """Apply the profile fields present in the request."""
    for field, value in user_data.model_dump(exclude_unset=True).items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)

    return user
