from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import date, datetime

class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[date] = None
    assigner_id: Optional[int] = None

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[date] = None

class TaskStatusUpdate(BaseModel):
    status: Optional[str] = None

class TaskAssignerOut(BaseModel):
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class TaskOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: str
    due_date: date
    assigner_id: int
    created_at: datetime
    updated_at: datetime
    assigner: Optional[TaskAssignerOut] = None

    model_config = ConfigDict(from_attributes=True)

class TaskMessageOut(TaskOut):
    message: str

class TaskListOut(BaseModel):
    status: str = "success"
    data: List[TaskOut] = Field(default_factory=list)
