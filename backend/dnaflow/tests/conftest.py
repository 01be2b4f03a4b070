import os
os.environ["TESTING"] = "1"
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[2]))

from dnaflow.main import app
from dnaflow.database import Base, get_db
from dnaflow.seed import seed_database

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False, "timeout": 30},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def seeded_db():
    """Rebuild the schema and load the default lab setup before every test."""

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestingSessionLocal() as session:
        seed_database(session)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def sequence_of(client, workflow_id: int):
    """Return ``(dna_process_id, process_order)`` pairs as the API reports them."""

    resp = client.get(f"/api/workflows/{workflow_id}")
    assert resp.status_code == 200, resp.text
    return [(p["dna_process_id"], p["process_order"]) for p in resp.json()["processes"]]
