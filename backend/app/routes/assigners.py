import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.parsing import clean_text, parse_id
from app.database.deps import get_db
from app.models.assigner import Assigner
from app.schemas.assigner import (
    AssignerCreatedOut,
    AssignerDeletedOut,
    AssignerIn,
    AssignerListOut,
    AssignerOut,
    AssignerSummaryOut,
    AssignerUpdatedOut,
)
from app.services.assigners import (
    AssignerHasIncompleteTasks,
    delete_assigner_with_completed_tasks,
    find_assigner_by_email,
)

router = APIRouter(prefix="/assigners", tags=["Assigners"])
logger = logging.getLogger("uvicorn.error")

INVALID_ID = "Invalid assigner ID"
NOT_FOUND = "Assigner not found"
EMAIL_IN_USE = "Email already in use"


def read_payload(payload: AssignerIn) -> tuple[str, str]:
    name = clean_text(payload.name)
    email = clean_text(payload.email)
    if not name or not email:
        raise HTTPException(status_code=400, detail="Name and email are required fields")
    return name, email


def get_assigner_or_404(db: Session, assigner_id: int) -> Assigner:
    assigner = db.query(Assigner).filter(Assigner.id == assigner_id).first()
    if not assigner:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return assigner


def commit_unique_email(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise HTTPException(status_code=400, detail=EMAIL_IN_USE) from exc


@router.get("", response_model=AssignerListOut)
def list_assigners(db: Session = Depends(get_db)):
    rows = db.query(Assigner).order_by(Assigner.id.asc()).all()
    if not rows:
        raise HTTPException(status_code=404, detail="No assigners found")
    return AssignerListOut(data=[AssignerSummaryOut.model_validate(row) for row in rows])


@router.post("", response_model=AssignerCreatedOut, status_code=status.HTTP_201_CREATED)
def create_assigner(payload: AssignerIn, db: Session = Depends(get_db)):
    name, email = read_payload(payload)
    if find_assigner_by_email(db, email):
        raise HTTPException(status_code=400, detail=EMAIL_IN_USE)

    assigner = Assigner(name=name, email=email)
    db.add(assigner)
    commit_unique_email(db)
    db.refresh(assigner)
    logger.info("Created assigner %s", assigner.id)
    return AssignerCreatedOut(assigner_id=assigner.id, name=assigner.name, email=assigner.email)


@router.get("/{assigner_id}", response_model=AssignerOut)
def read_assigner(assigner_id: str, db: Session = Depends(get_db)):
    return get_assigner_or_404(db, parse_id(assigner_id, INVALID_ID))


@router.put("/{assigner_id}", response_model=AssignerUpdatedOut)
def update_assigner(assigner_id: str, payload: AssignerIn, db: Session = Depends(get_db)):
    parsed_id = parse_id(assigner_id, INVALID_ID)
    name, email = read_payload(payload)
    assigner = get_assigner_or_404(db, parsed_id)

    if email != assigner.email and find_assigner_by_email(db, email, exclude_id=parsed_id):
        raise HTTPException(status_code=400, detail=EMAIL_IN_USE)

    assigner.name = name
    assigner.email = email
    commit_unique_email(db)
    db.refresh(assigner)
    logger.info("Updated assigner %s", assigner.id)
    return AssignerUpdatedOut(
        id=assigner.id,
        name=assigner.name,
        email=assigner.email,
        updated_at=assigner.updated_at,
    )


@router.delete("/{assigner_id}", response_model=AssignerDeletedOut)
def delete_assigner(assigner_id: str, db: Session = Depends(get_db)):
    parsed_id = parse_id(assigner_id, INVALID_ID)
    get_assigner_or_404(db, parsed_id)
    try:
        delete_assigner_with_completed_tasks(db, parsed_id)
    except AssignerHasIncompleteTasks as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return AssignerDeletedOut()
