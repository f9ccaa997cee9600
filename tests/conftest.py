"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- A recording mail client
- Employer / job seeker accounts and their auth headers
"""

import os

# Settings are read at import time; point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("MAIL_BACKEND", "console")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.deps import get_mail_client
from app.core.security import create_access_token, get_password_hash
from app.models.job import Job
from app.models.user import User, UserRole
from app.services.email_service import MailClient, MailDeliveryError
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Hashing once keeps bcrypt out of every fixture
TEST_PASSWORD = "TestPass123"
TEST_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)


class RecordingMailClient(MailClient):
    """Mail client that stores messages instead of sending them."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send_message(self, sender, recipient, subject, text_body, html_body=None):
        if self.fail:
            raise MailDeliveryError("SMTP connection refused")
        self.sent.append({
            "sender": sender,
            "recipient": recipient,
            "subject": subject,
            "text": text_body,
            "html": html_body,
        })
        return f"test-{len(self.sent)}"


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def mail_client():
    return RecordingMailClient()


@pytest.fixture
def client(db_session, mail_client):
    """
    FastAPI test client with overridden database and mail dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mail_client] = lambda: mail_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_user(db_session, email, role, name="Test User", **fields):
    """Helper to insert a user directly."""
    user = User(
        email=email,
        hashed_password=TEST_PASSWORD_HASH,
        role=role,
        name=name,
        **fields
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def make_auth_headers(user):
    """Helper to build a bearer header for a user."""
    token = create_access_token(data={"sub": str(user.id), "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Bearer header factory: auth_headers(user)."""
    return make_auth_headers


@pytest.fixture
def employer(db_session):
    return create_user(
        db_session, "hr@acme.example", UserRole.EMPLOYER,
        name="Acme HR", company_name="Acme Corp", company_logo="https://cdn.example/acme.png"
    )


@pytest.fixture
def other_employer(db_session):
    return create_user(db_session, "jobs@globex.example", UserRole.EMPLOYER, name="Globex HR", company_name="Globex")


@pytest.fixture
def jobseeker(db_session):
    return create_user(
        db_session, "sam@example.com", UserRole.JOBSEEKER,
        name="Sam Seeker", resume="https://cdn.example/sam.pdf"
    )


@pytest.fixture
def other_jobseeker(db_session):
    return create_user(db_session, "alex@example.com", UserRole.JOBSEEKER, name="Alex Applicant")


@pytest.fixture
def job(db_session, employer):
    job = Job(
        company_id=employer.id,
        title="Senior Python Developer",
        description="Build and run our hiring APIs.",
        location="Berlin, Germany",
        category="Engineering",
        type="Full-Time",
        salary_min=70000,
        salary_max=95000,
    )
    db_session.add(job)
    db_session.commit()
    db_session.refresh(job)
    return job


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Backend Engineer",
        "description": "FastAPI, PostgreSQL and AWS.",
        "requirements": "3+ years of Python",
        "location": "Remote (EU)",
        "category": "Engineering",
        "type": "Remote",
        "salary_min": 60000,
        "salary_max": 80000,
    }
