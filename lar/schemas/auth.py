from pydantic import EmailStr, Field
from .common import CamelModel


class DevLoginIn(CamelModel):
    id: str = Field(min_length=1, max_length=255)
    email: EmailStr | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class TokenOut(CamelModel):
    access_token: str
    token_type: str = "bearer"
