import os
import tempfile
from datetime import date
from pathlib import Path
from uuid import uuid4

import pytest

TEST_DB_FILE = Path(tempfile.gettempdir()) / f"test_task_admin_{uuid4().hex}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_FILE.as_posix()}"
os.environ["DB_BOOTSTRAP_MODE"] = "off"

from fastapi.testclient import TestClient  # noqa: E402

from app.database.base import Base  # noqa: E402
from app.database.session import SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models.assigner import Assigner  # noqa: E402
from app.models.task import Task  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    engine.dispose()
    if TEST_DB_FILE.exists():
        TEST_DB_FILE.unlink()
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        if TEST_DB_FILE.exists():
            TEST_DB_FILE.unlink()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_assigner(db_session):
    def factory(name: str = "Ann", email: str | None = None) -> Assigner:
        return create_assigner(db_session, name=name, email=email)

    return factory


@pytest.fixture
def make_task(db_session):
    def factory(assigner: Assigner, status: str = "pending", due_date: date = date(2025, 1, 1), title: str = "Task") -> Task:
        return create_task(db_session, assigner, status=status, due_date=due_date, title=title)

    return factory


def create_assigner(db, name: str = "Ann", email: str | None = None) -> Assigner:
    assigner = Assigner(name=name, email=email or f"{uuid4().hex[:8]}@test.local")
    db.add(assigner)
    db.commit()
    db.refresh(assigner)
    return assigner


def create_task(db, assigner: Assigner, status: str = "pending", due_date: date = date(2025, 1, 1), title: str = "Task") -> Task:
    task = Task(title=title, status=status, due_date=due_date, assigner_id=assigner.id)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task
