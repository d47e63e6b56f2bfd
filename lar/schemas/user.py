from datetime import datetime
from pydantic import Field
from .common import CamelModel, ORMModel


class UserOut(ORMModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    points: int
    home_id: str | None = None
    created_at: datetime
    updated_at: datetime


class UserUpdate(CamelModel):
    first_name: str | None = Field(default=None, max_length=128)
    last_name: str | None = Field(default=None, max_length=128)
    profile_image_url: str | None = Field(default=None, max_length=512)
