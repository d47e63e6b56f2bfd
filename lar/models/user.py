from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db.base_class import Base
from ..db.types import UTCDateTime
from . import utcnow

if TYPE_CHECKING:
    from .home import Home


class User(Base):
    __tablename__ = "users"

    # subject claim of the identity provider
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True, index=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(128))
    last_name: Mapped[Optional[str]] = mapped_column(String(128))
    profile_image_url: Mapped[Optional[str]] = mapped_column(String(512))
    points: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    # homes.created_by points back here, so this side is added after both tables exist
    home_id: Mapped[Optional[str]] = mapped_column(
        String(21), ForeignKey("homes.id", use_alter=True, name="fk_users_home_id"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow, onupdate=utcnow, nullable=False)

    home: Mapped["Home | None"] = relationship(back_populates="members", foreign_keys=[home_id])
