from datetime import datetime
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel
from ..models.task import TaskPriority, TaskStatus
from .common import CamelModel, ORMModel
from .home import HomeOut
from .user import UserOut


class TaskCreate(CamelModel):
    title: str = Field(min_length=1, max_length=100)
    description: str | None = None
    assigned_to: str = Field(min_length=1)
    priority: TaskPriority = TaskPriority.MEDIUM
    deadline: datetime | None = None
    points: int = Field(default=5, ge=1, le=50)


class TaskUpdate(CamelModel):
    # status only moves through /complete
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    assigned_to: str | None = Field(default=None, min_length=1)
    priority: TaskPriority | None = None
    deadline: datetime | None = None
    points: int | None = Field(default=None, ge=1, le=50)


class TaskOut(ORMModel):
    id: int
    title: str
    description: str | None = None
    deadline: datetime | None = None
    priority: TaskPriority
    status: TaskStatus
    points: int
    created_by: str
    assigned_to: str
    home_id: str
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    creator: UserOut | None = None
    assignee: UserOut | None = None
    home: HomeOut | None = None


class TaskCompletedOut(CamelModel):
    task: TaskOut
    message: str
