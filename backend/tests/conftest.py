"""Shared fixtures: in-memory SQLite database, reference companies, API client."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models.company import Company


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def companies(db):
    rows = [
        Company(
            id="ets-mlf",
            name="ETS MLF",
            display_name="ETS MLF",
            markup_percentage=Decimal("0"),
            template_id="template_standard",
            is_default=True,
        ),
        Company(
            id="thiernodjo",
            name="LES BOUTIQUES THIERNODJO & FRERE",
            display_name="LES BOUTIQUES THIERNODJO & FRERE",
            markup_percentage=Decimal("15"),
            template_id="template_moderne_blue",
        ),
        Company(
            id="kankan",
            name="KANKAN DISTRIBUTION SARL",
            display_name="KANKAN DISTRIBUTION SARL",
            markup_percentage=Decimal("10"),
            template_id="template_standard",
        ),
    ]
    db.add_all(rows)
    db.commit()
    return {company.id: company for company in rows}


@pytest.fixture
def client(session_factory, companies):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    return {"X-User-Id": "user-1"}
