from pydantic import BaseModel


class StatusCountsOut(BaseModel):
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    total_tasks: int = 0


class TasksByStatusOut(BaseModel):
    stats: StatusCountsOut


class AssignerStatsOut(BaseModel):
    assigner_id: int
    assigner_name: str
    total_tasks: int
    completed_tasks: int
    # total_tasks - completed_tasks, so in_progress tasks are counted here too
    pending_tasks: int
    completion_rate: int


class TasksByAssignerOut(BaseModel):
    stats: list[AssignerStatsOut]
