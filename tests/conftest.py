"""Shared test fixtures."""

from __future__ import annotations

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from types import SimpleNamespace  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fieldops.auth import create_access_token  # noqa: E402
from fieldops.database import Base, get_db  # noqa: E402
from fieldops.main import app  # noqa: E402
from fieldops.models import (  # noqa: E402
    Company,
    CompanyUser,
    Contact,
    Project,
    TaskCategory,
    Team,
    TeamMember,
    User,
)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def tenant(db) -> SimpleNamespace:
    """Two companies; the first one with a project, members, teams and a category."""
    company = Company(id="c1", name="Acme Facilities")
    other_company = Company(id="c2", name="Other Co")
    owner = User(id="owner", email="owner@acme.com", name="Olivia", surname="Owner")
    outsider = User(id="outsider", email="outsider@other.com", name="Oscar")
    users = [
        User(id="u1", email="u1@x.com", name="Ann", surname="Archer"),
        User(id="u2", email="u2@x.com", name="Ben", surname="Baker"),
        User(id="u3", email="u3@x.com", name="Cleo", surname="Cooper"),
    ]
    contact = Contact(id="cust1", company_id="c1", contact_name="Roof Owner")
    project = Project(id="proj1", company_id="c1", contact_id="cust1", name="Roof repair")
    other_project = Project(id="proj2", company_id="c1", contact_id="cust1", name="Fence repair")
    team_a = Team(id="team-a", company_id="c1", name="Alpha", code="ALP", color="#FF0000")
    team_b = Team(id="team-b", company_id="c1", name="Bravo", code="BRV", color=None)
    foreign_team = Team(id="team-x", company_id="c2", name="Xray", code="XRY", color=None)
    category = TaskCategory(id="cat-inspection", company_id="c1", name="Inspection")

    db.add_all([company, other_company, owner, outsider, *users, contact, project, other_project])
    db.add_all([team_a, team_b, foreign_team, category])
    db.add_all(
        [
            CompanyUser(company_id="c1", user_id="owner"),
            CompanyUser(company_id="c2", user_id="outsider"),
            *[CompanyUser(company_id="c1", user_id=user.id) for user in users],
            TeamMember(team_id="team-a", user_id="u1"),
            TeamMember(team_id="team-a", user_id="u3"),
            TeamMember(team_id="team-b", user_id="u2"),
            TeamMember(team_id="team-b", user_id="u3"),
            TeamMember(team_id="team-x", user_id="u1"),
        ]
    )
    db.commit()
    return SimpleNamespace(
        company_id="c1",
        other_company_id="c2",
        project_id="proj1",
        contact_id="cust1",
        category_id="cat-inspection",
    )


def job_order_payload(**overrides) -> dict:
    """Minimal valid job order body: new working order, new task detail, one individual."""
    payload = {
        "case": {"id": "proj1", "customerId": "cust1"},
        "workingOrder": {"isNew": True, "title": "Site visit"},
        "taskDetails": {
            "isNew": True,
            "title": "Inspect roof",
            "category": "Maintenance",
            "instructions": ["Check gutters", "Check shingles"],
        },
        "schedule": {"enabled": False, "repeating": {"enabled": False}},
        "assignedResources": {
            "teams": [],
            "teamUsers": [],
            "individualUsers": [{"id": "u1", "email": "u1@x.com"}],
        },
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def client(session_factory):
    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers(tenant) -> dict[str, str]:
    token = create_access_token("owner", "owner@acme.com", "Olivia")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_payload():
    return job_order_payload
