import base64
import json
import os
import time
from datetime import datetime
from zoneinfo import ZoneInfo

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

# Identity provider key pair for signing test tokens; must exist before poolroute is imported
SIGNING_KEY = rsa.generate_private_key(public_exponent=65537, key_size=2048)
PUBLIC_KEY_PEM = (
    SIGNING_KEY.public_key()
    .public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo)
    .decode()
)

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IDENTITY_PROVIDER_PUBLIC_KEY"] = PUBLIC_KEY_PEM
os.environ["APP_TIMEZONE"] = "America/New_York"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from poolroute.auth import Identity, get_current_user  # noqa: E402
from poolroute.database import Base, get_db  # noqa: E402
from poolroute.main import app as fastapi_app  # noqa: E402
from poolroute.models import ChemicalUsage, Customer, ServiceLog  # noqa: E402
from poolroute.shared.calendar import current_time  # noqa: E402

# Wednesday; the week runs Monday 2024-03-04 .. Sunday 2024-03-10
TEST_NOW = datetime(2024, 3, 6, 10, 0, tzinfo=ZoneInfo("America/New_York"))


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def sign_token(claims: dict, header: dict = None, key=SIGNING_KEY) -> str:
    """RS256 token in the identity provider's format"""
    header = header or {"alg": "RS256", "typ": "JWT"}
    signing_input = f"{_b64(json.dumps(header).encode())}.{_b64(json.dumps(claims).encode())}"
    signature = key.sign(signing_input.encode(), padding.PKCS1v15(), hashes.SHA256())
    return f"{signing_input}.{_b64(signature)}"


def valid_claims(**overrides) -> dict:
    now = int(time.time())
    claims = {
        "sub": "tech-1",
        "email": "tech@example.com",
        "name": "Pat Tech",
        "iat": now,
        "exp": now + 3600,
    }
    claims.update(overrides)
    return claims


def make_customer(db, name, service_day="Monday", sort_order=None, owner="tech@example.com"):
    customer = Customer(
        full_name=name,
        address=f"{name} Street 1",
        service_day=service_day,
        pool_type="Chlorine",
        surface_type="Plaster",
        sort_order=sort_order,
        created_by=owner,
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


def make_log(db, customer_id, service_date, **fields):
    values = {
        "status": "completed",
        "ph": "good",
        "chlorine": "good",
        "alkalinity": "good",
        "stabilizer": "good",
    }
    values.update(fields)
    log = ServiceLog(customer_id=customer_id, service_date=service_date, **values)
    db.add(log)
    db.commit()
    db.refresh(log)
    return log


def make_usage(db, customer_id, created_date, chemical_type="Liquid Chlorine", quantity="2 gal"):
    record = ChemicalUsage(
        customer_id=customer_id,
        chemical_type=chemical_type,
        quantity=quantity,
        created_date=created_date,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def identity():
    return Identity(subject="tech-1", email="tech@example.com", name="Pat Tech")


@pytest.fixture
def app(session_factory, identity):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_current_user] = lambda: identity
    fastapi_app.dependency_overrides[current_time] = lambda: TEST_NOW
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
