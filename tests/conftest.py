import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-union-office")

import json

import httpx
import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from union_office.database import get_db
from union_office.models.base import Base
from union_office.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from union_office.models.storage_entry import StorageEntry  # noqa: F401
from union_office.models.tenant_context import TenantContext
from union_office.repositories.storage import MemoryStorage
from union_office.schemas.auth_schemas import RegisterRequest
from union_office.services.auth_service import AuthService
from union_office.services.mail_service import MailService
from union_office.dependencies import get_mail_service
# Import FastAPI app AFTER model imports
from union_office.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def mail_outbox():
    """Payloads posted to the (mocked) Resend API"""
    return []


@pytest.fixture
def mail_service(mail_outbox):
    """MailService whose HTTP calls are answered by a mock transport"""

    def handler(request: httpx.Request) -> httpx.Response:
        mail_outbox.append(json.loads(request.content))
        return httpx.Response(200, json={"id": f"email-{len(mail_outbox)}"})

    return MailService(api_key="re_test_key", transport=httpx.MockTransport(handler))


@pytest.fixture(scope="function")
def client(db_session, mail_service):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_mail_service] = lambda: mail_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(user_id: str, sede_id: str = "sede-test", expired: bool = False) -> str:
    """
    Generate JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        sede_id: Office ID to embed in 'sede_id' claim
        expired: If True, create expired token

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "sede_id": sede_id, "exp": exp, "iat": datetime.now(UTC)}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")


def register(client, email: str, office_name: str, operator_name: str = "Operatore", password: str = "secret"):
    """Register a user through the API and return the response JSON"""
    response = client.post(
        "/api/auth/register",
        json={
            "email": email,
            "password": password,
            "office_name": office_name,
            "operator_name": operator_name,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def login_headers(client, email: str, password: str = "secret") -> dict:
    """Log in through the API and return Authorization headers"""
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def owner_headers(client):
    """Headers for the owner of office "Sede Roma" """
    register(client, "anna@sederoma.it", "Sede Roma", "Anna Bianchi")
    return login_headers(client, "anna@sederoma.it")


@pytest.fixture
def operator_headers(client, owner_headers):
    """Headers for a second user of "Sede Roma" (joins as operator)"""
    register(client, "marco@sederoma.it", "sede roma", "Marco Verdi")
    return login_headers(client, "marco@sederoma.it")


@pytest.fixture
def other_office_headers(client):
    """Headers for the owner of an unrelated office"""
    register(client, "luca@sedemilano.it", "Sede Milano", "Luca Neri")
    return login_headers(client, "luca@sedemilano.it")


# --- Service-level fixtures (in-memory storage) ---


@pytest.fixture
def storage():
    return MemoryStorage()


def make_context(storage, email: str, office_name: str, operator_name: str = "Operatore") -> TenantContext:
    user = AuthService(storage).register(
        RegisterRequest(email=email, password="secret", office_name=office_name, operator_name=operator_name)
    )
    return TenantContext(user=user)


@pytest.fixture
def office_a(storage) -> TenantContext:
    return make_context(storage, "owner@a.it", "Sede Roma", "Anna")


@pytest.fixture
def office_b(storage) -> TenantContext:
    return make_context(storage, "owner@b.it", "Sede Napoli", "Bruno")
