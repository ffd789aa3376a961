from app.models.assigner import Assigner  # noqa: F401
from app.models.task import Task  # noqa: F401
