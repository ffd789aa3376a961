from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database.deps import get_db
from app.schemas.stats import TasksByAssignerOut, TasksByStatusOut
from app.services.stats import count_tasks_by_assigner, count_tasks_by_status

router = APIRouter(prefix="/stats", tags=["Stats"])

NO_STATS = "No statistics available"


@router.get("/tasks_by_status", response_model=TasksByStatusOut)
def tasks_by_status(db: Session = Depends(get_db)):
    counts = count_tasks_by_status(db)
    if counts is None:
        raise HTTPException(status_code=404, detail=NO_STATS)
    return {"stats": counts}


@router.get("/tasks_by_assigner", response_model=TasksByAssignerOut)
def tasks_by_assigner(db: Session = Depends(get_db)):
    rows = count_tasks_by_assigner(db)
    if not rows:
        raise HTTPException(status_code=404, detail=NO_STATS)
    return {"stats": rows}
