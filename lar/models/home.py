from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db.base_class import Base
from ..db.types import UTCDateTime
from . import utcnow

if TYPE_CHECKING:
    from .user import User
    from .task import Task


class Home(Base):
    __tablename__ = "homes"

    id: Mapped[str] = mapped_column(String(21), primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    created_by: Mapped[str] = mapped_column(String(255), ForeignKey("users.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, onupdate=utcnow, nullable=False)

    creator: Mapped["User"] = relationship(foreign_keys=[created_by])
    members: Mapped[list["User"]] = relationship(
        back_populates="home",
        foreign_keys="User.home_id",
        order_by="User.created_at",
    )
    tasks: Mapped[list["Task"]] = relationship(back_populates="home")
