import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.database.transaction import atomic
from app.models.assigner import Assigner
from app.models.status import TaskStatus
from app.models.task import Task

logger = logging.getLogger("uvicorn.error")


class AssignerHasIncompleteTasks(Exception):
    def __init__(self, assigner_id: int, incomplete_count: int):
        self.assigner_id = assigner_id
        self.incomplete_count = incomplete_count
        super().__init__(
            f"Cannot delete assigner. They still have {incomplete_count} incomplete task(s)."
        )


def find_assigner_by_email(db: Session, email: str, exclude_id: Optional[int] = None) -> Optional[Assigner]:
    query = db.query(Assigner).filter(Assigner.email == email)
    if exclude_id is not None:
        query = query.filter(Assigner.id != exclude_id)
    return query.first()


def count_incomplete_tasks(db: Session, assigner_id: int) -> int:
    rows = db.query(Task.id, Task.status).filter(Task.assigner_id == assigner_id).all()
    return sum(1 for _, task_status in rows if task_status != TaskStatus.COMPLETED.value)


def delete_assigner_with_completed_tasks(db: Session, assigner_id: int) -> int:
    """Remove an assigner together with its completed tasks.

    The assigner must not own any task outside the ``completed`` state; when
    it does, ``AssignerHasIncompleteTasks`` is raised before anything is
    touched. The task delete and the assigner delete share one transaction,
    so either both row sets disappear or neither does.

    Returns the number of tasks removed.
    """
    incomplete = count_incomplete_tasks(db, assigner_id)
    if incomplete:
        logger.info("Refusing to delete assigner %s: %s incomplete task(s)", assigner_id, incomplete)
        raise AssignerHasIncompleteTasks(assigner_id, incomplete)

    with atomic(db):
        removed = (
            db.query(Task)
            .filter(Task.assigner_id == assigner_id, Task.status == TaskStatus.COMPLETED.value)
            .delete(synchronize_session=False)
        )
        db.query(Assigner).filter(Assigner.id == assigner_id).delete(synchronize_session=False)

    logger.info("Deleted assigner %s and %s completed task(s)", assigner_id, removed)
    return removed
