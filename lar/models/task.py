from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING
from sqlalchemy import String, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base_class import Base
from ..db.types import UTCDateTime
from . import utcnow

if TYPE_CHECKING:
    from .user import User
    from .home import Home


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    deadline: Mapped[datetime | None] = mapped_column(UTCDateTime())
    priority: Mapped[TaskPriority] = mapped_column(default=TaskPriority.MEDIUM, nullable=False)
    status: Mapped[TaskStatus] = mapped_column(default=TaskStatus.PENDING, index=True, nullable=False)
    points: Mapped[int] = mapped_column(Integer, default=5, nullable=False)
    created_by: Mapped[str] = mapped_column(String(255), ForeignKey("users.id"), nullable=False)
    assigned_to: Mapped[str] = mapped_column(String(255), ForeignKey("users.id"), index=True, nullable=False)
    home_id: Mapped[str] = mapped_column(String(21), ForeignKey("homes.id"), index=True, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(UTCDateTime())
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, onupdate=utcnow, nullable=False)

    creator: Mapped["User"] = relationship(foreign_keys=[created_by])
    assignee: Mapped["User"] = relationship(foreign_keys=[assigned_to])
    home: Mapped["Home"] = relationship(back_populates="tasks")
