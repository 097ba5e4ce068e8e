"""
Pytest configuration and fixtures for the Fermenta.to API tests.

Every test runs against a fresh in-memory SQLite database.
"""
import itertools
import os

# Must be set before the app (and its settings/engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"
os.environ["ADMIN_EMAIL"] = ""
os.environ["ADMIN_PASSWORD"] = ""
os.environ["GOOGLE_CLIENT_ID"] = ""
os.environ["GOOGLE_CLIENT_SECRET"] = ""

import pytest
from fastapi.testclient import TestClient

from fermentato.database import SessionLocal, engine, init_db
from fermentato.main import app
from fermentato.models import Base, Beer, Brewery, Role, User
from fermentato.utils import generate_id

PASSWORD = "birra-artigianale"

HOP_GARDEN = {
    "name": "The Hop Garden",
    "address": "Via Brera 12",
    "city": "Milano",
    "region": "Lombardia",
    "vat_number": "12345678901",
    "business_name": "Hop Garden S.r.l.",
}


# =============================================================================
# Database
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_db():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


# =============================================================================
# Clients and users
# =============================================================================

_emails = itertools.count(1)


@pytest.fixture
def client():
    """Anonymous client."""
    return TestClient(app)


@pytest.fixture
def new_user():
    """Factory: register a user and return a client logged in as them.

    The client carries `user` (the registration response) as an attribute.
    """

    def _new_user(email: str | None = None, roles: list[Role] | None = None) -> TestClient:
        c = TestClient(app)
        email = email or f"user{next(_emails)}@example.com"
        resp = c.post("/api/auth/register", json={
            "email": email,
            "password": PASSWORD,
            "first_name": "Test",
        })
        assert resp.status_code == 201, resp.text
        c.user = resp.json()
        if roles:
            with SessionLocal() as session:
                user = session.get(User, c.user["id"])
                user.roles = sorted({*user.roles, *(r.value for r in roles)})
                session.commit()
        return c

    return _new_user


@pytest.fixture
def user_client(new_user):
    return new_user()


@pytest.fixture
def admin_client(new_user):
    return new_user(roles=[Role.admin])


@pytest.fixture
def owner_client(new_user):
    """A user who registered The Hop Garden. `owner_client.pub` is the pub."""
    c = new_user()
    resp = c.post("/api/pubs", json=HOP_GARDEN)
    assert resp.status_code == 201, resp.text
    c.pub = resp.json()
    return c


# =============================================================================
# Catalog
# =============================================================================

@pytest.fixture
def make_beer():
    """Factory: insert a brewery (reused by name) and a beer, return the beer id."""

    def _make_beer(name: str = "Tipopils", brewery: str = "Birrificio Italiano", style: str = "Pilsner") -> str:
        with SessionLocal() as session:
            b = session.query(Brewery).filter(Brewery.name == brewery).first()
            if b is None:
                b = Brewery(id=generate_id(), name=brewery, location="Lurago Marinone", region="Lombardia")
                session.add(b)
                session.flush()
            beer = Beer(id=generate_id(), name=name, brewery_id=b.id, style=style, abv=5.2)
            session.add(beer)
            session.commit()
            return beer.id

    return _make_beer


@pytest.fixture
def beer_id(make_beer):
    return make_beer()
