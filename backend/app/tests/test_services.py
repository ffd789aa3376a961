import pytest

from app.database.transaction import atomic
from app.models.assigner import Assigner
from app.models.task import Task
from app.services.assigners import (
    AssignerHasIncompleteTasks,
    count_incomplete_tasks,
    delete_assigner_with_completed_tasks,
    find_assigner_by_email,
)
from app.services.stats import completion_rate, count_tasks_by_status


def test_atomic_rolls_back_every_statement(db_session, make_assigner, make_task):
    assigner = make_assigner()
    make_task(assigner, status="completed")
    assigner_id = assigner.id

    with pytest.raises(RuntimeError):
        with atomic(db_session):
            db_session.query(Task).filter(Task.assigner_id == assigner_id).delete(synchronize_session=False)
            db_session.query(Assigner).filter(Assigner.id == assigner_id).delete(synchronize_session=False)
            raise RuntimeError("boom")

    assert db_session.query(Assigner).filter(Assigner.id == assigner_id).count() == 1
    assert db_session.query(Task).filter(Task.assigner_id == assigner_id).count() == 1


def test_delete_gate_leaves_everything_in_place(db_session, make_assigner, make_task):
    assigner = make_assigner()
    make_task(assigner, status="completed")
    make_task(assigner, status="in_progress")
    assigner_id = assigner.id

    assert count_incomplete_tasks(db_session, assigner_id) == 1
    with pytest.raises(AssignerHasIncompleteTasks) as excinfo:
        delete_assigner_with_completed_tasks(db_session, assigner_id)

    assert excinfo.value.incomplete_count == 1
    assert db_session.query(Task).filter(Task.assigner_id == assigner_id).count() == 2


def test_delete_returns_removed_task_count(db_session, make_assigner, make_task):
    assigner = make_assigner()
    make_task(assigner, status="completed")
    make_task(assigner, status="completed")
    assigner_id = assigner.id

    assert delete_assigner_with_completed_tasks(db_session, assigner_id) == 2
    assert db_session.query(Assigner).filter(Assigner.id == assigner_id).first() is None


def test_find_assigner_by_email_excludes_self(db_session, make_assigner):
    assigner = make_assigner(email="a@x.com")
    assert find_assigner_by_email(db_session, "a@x.com").id == assigner.id
    assert find_assigner_by_email(db_session, "a@x.com", exclude_id=assigner.id) is None


def test_completion_rate():
    assert completion_rate(0, 0) == 0
    assert completion_rate(1, 3) == 33
    assert completion_rate(2, 3) == 67
    assert completion_rate(1, 8) == 13
    assert completion_rate(29, 200) == 14
    assert completion_rate(4, 4) == 100


def test_count_tasks_by_status_empty(db_session):
    assert count_tasks_by_status(db_session) is None
