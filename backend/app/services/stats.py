import math

from sqlalchemy import and_, case, func
from sqlalchemy.orm import Session

from app.models.assigner import Assigner
from app.models.status import TaskStatus, VALID_TASK_STATUSES
from app.models.task import Task


def completion_rate(completed: int, total: int) -> int:
    if not total:
        return 0
    # half-up on the divided ratio, so 12.5 reports as 13
    return int(math.floor(completed / total * 100 + 0.5))


def count_tasks_by_status(db: Session) -> dict | None:
    rows = db.query(Task.status, func.count(Task.id)).group_by(Task.status).all()
    if not rows:
        return None
    buckets = {task_status: int(count) for task_status, count in rows}
    result = {key: buckets.get(key, 0) for key in VALID_TASK_STATUSES}
    result["total_tasks"] = sum(buckets.values())
    return result


def count_tasks_by_assigner(db: Session) -> list[dict]:
    completed_expr = func.coalesce(
        func.sum(case((Task.status == TaskStatus.COMPLETED.value, 1), else_=0)),
        0,
    )
    rows = (
        db.query(
            Assigner.id,
            Assigner.name,
            func.count(Task.id).label("total_tasks"),
            completed_expr.label("completed_tasks"),
        )
        .outerjoin(
            Task,
            and_(Task.assigner_id == Assigner.id, Task.status.in_(VALID_TASK_STATUSES)),
        )
        .group_by(Assigner.id, Assigner.name)
        .order_by(Assigner.id.asc())
        .all()
    )
    stats = []
    for assigner_id, name, total, completed in rows:
        total = int(total or 0)
        completed = int(completed or 0)
        stats.append({
            "assigner_id": assigner_id,
            "assigner_name": name,
            "total_tasks": total,
            "completed_tasks": completed,
            "pending_tasks": total - completed,
            "completion_rate": completion_rate(completed, total),
        })
    return stats
