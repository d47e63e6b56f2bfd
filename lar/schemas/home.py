from datetime import datetime
from typing import List
from pydantic import Field
from .common import CamelModel, ORMModel
from .user import UserOut


class HomeCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)


class HomeOut(ORMModel):
    id: str
    name: str
    created_by: str
    created_at: datetime
    updated_at: datetime


class HomeDetailOut(HomeOut):
    members: List[UserOut] = []
    creator: UserOut | None = None


class HomeCreatedOut(CamelModel):
    home: HomeOut
    message: str
