import logging

from fastapi import APIRouter, HTTPException, Depends, Response
from sqlalchemy.orm import Session, joinedload
from typing import Optional
from app.core.parsing import (
    clean_text,
    ensure_valid_status,
    parse_id,
    parse_optional_date,
)
from app.models.assigner import Assigner
from app.models.task import Task
from app.schemas.task import (
    TaskCreate,
    TaskListOut,
    TaskMessageOut,
    TaskOut,
    TaskStatusUpdate,
    TaskUpdate,
)
from app.database.deps import get_db

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"]
)
logger = logging.getLogger("uvicorn.error")

INVALID_ID = "Invalid task ID"
NOT_FOUND = "Task not found"

def build_task_out(task: Task, message: Optional[str] = None):
    out = TaskOut.model_validate(task)
    if message is None:
        return out
    return TaskMessageOut(**out.model_dump(), message=message)

def get_task_or_404(db: Session, task_id: int) -> Task:
    db_task = (
        db.query(Task)
        .options(joinedload(Task.assigner))
        .filter(Task.id == task_id)
        .first()
    )
    if not db_task:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_task

@router.get("", response_model=TaskListOut)
def read_tasks(
    assigner_id: Optional[str] = None,
    status: Optional[str] = None,
    due_before: Optional[str] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Task).options(joinedload(Task.assigner))
    if assigner_id:
        query = query.filter(Task.assigner_id == parse_id(assigner_id, "Invalid assigner ID"))
    if status:
        query = query.filter(Task.status == ensure_valid_status(status))
    due_limit = parse_optional_date(due_before)
    if due_limit:
        query = query.filter(Task.due_date <= due_limit)

    rows = query.order_by(Task.due_date.asc(), Task.id.asc()).all()
    if not rows:
        raise HTTPException(status_code=404, detail="No tasks found")
    return TaskListOut(data=[build_task_out(task) for task in rows])

@router.post("", response_model=TaskMessageOut, status_code=201)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db)
):
    title = clean_text(task.title)
    if not title or not task.status or not task.due_date or not task.assigner_id:
        raise HTTPException(
            status_code=400,
            detail="Title, status, due date, and assigner ID are required fields"
        )
    ensure_valid_status(task.status)

    assigner = db.query(Assigner).filter(Assigner.id == task.assigner_id).first()
    if not assigner:
        raise HTTPException(status_code=400, detail="Assigner not found")

    db_task = Task(
        title=title,
        description=task.description,
        status=task.status,
        due_date=task.due_date,
        assigner_id=assigner.id
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("Created task %s for assigner %s", db_task.id, assigner.id)
    return build_task_out(db_task, "Task created successfully")

@router.get("/{task_id}", response_model=TaskOut)
def read_task(
    task_id: str,
    db: Session = Depends(get_db)
):
    return build_task_out(get_task_or_404(db, parse_id(task_id, INVALID_ID)))

@router.put("/{task_id}", response_model=TaskMessageOut)
def update_task(
    task_id: str,
    task: TaskUpdate,
    db: Session = Depends(get_db)
):
    db_task = get_task_or_404(db, parse_id(task_id, INVALID_ID))
    data = task.model_dump(exclude_unset=True)

    # null or blank values leave the stored field untouched
    changes = {
        key: value
        for key, value in data.items()
        if value is not None and not (isinstance(value, str) and not value.strip())
    }
    if "status" in changes:
        ensure_valid_status(changes["status"])
    if "title" in changes:
        changes["title"] = changes["title"].strip()

    for key, value in changes.items():
        setattr(db_task, key, value)

    db.commit()
    db.refresh(db_task)
    return build_task_out(db_task, "Task updated successfully")

@router.patch("/{task_id}/status", response_model=TaskMessageOut)
def update_task_status(
    task_id: str,
    payload: TaskStatusUpdate,
    db: Session = Depends(get_db)
):
    parsed_id = parse_id(task_id, INVALID_ID)
    if not payload.status:
        raise HTTPException(status_code=400, detail="Status is required")
    new_status = ensure_valid_status(payload.status)

    db_task = get_task_or_404(db, parsed_id)
    db_task.status = new_status
    db.commit()
    db.refresh(db_task)
    return build_task_out(db_task, "Task status updated successfully")

@router.delete("/{task_id}", status_code=204)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db)
):
    parsed_id = parse_id(task_id, INVALID_ID)
    db_task = get_task_or_404(db, parsed_id)
    db.delete(db_task)
    db.commit()
    logger.info("Deleted task %s", parsed_id)
    return Response(status_code=204)
