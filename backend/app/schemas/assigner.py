from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AssignerIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class AssignerSummaryOut(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AssignerListOut(BaseModel):
    status: str = "success"
    data: list[AssignerSummaryOut] = Field(default_factory=list)


class AssignerOut(AssignerSummaryOut):
    created_at: datetime
    updated_at: datetime


class AssignerCreatedOut(BaseModel):
    assigner_id: int
    name: str
    email: str
    message: str = "Assigner created successfully"


class AssignerUpdatedOut(AssignerSummaryOut):
    updated_at: datetime
    message: str = "Assigner updated successfully"


class AssignerDeletedOut(BaseModel):
    status: str = "success"
    message: str = "Assigner and their completed tasks deleted successfully"
