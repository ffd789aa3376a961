from datetime import date
from typing import Optional

from fastapi import HTTPException, status

from app.models.status import VALID_TASK_STATUSES

INVALID_STATUS_MESSAGE = "Invalid status. Must be one of: " + ", ".join(VALID_TASK_STATUSES)


def parse_id(value: str, detail: str) -> int:
    text = str(value or "").strip()
    if not (text.isascii() and text.isdigit()):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return int(text)


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date. Use YYYY-MM-DD.") from exc


def ensure_valid_status(value: Optional[str]) -> str:
    if value not in VALID_TASK_STATUSES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_STATUS_MESSAGE)
    return value


def clean_text(value: Optional[str]) -> str:
    return str(value or "").strip()
