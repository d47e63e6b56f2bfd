from datetime import datetime, timedelta, timezone
from typing import Any
import jwt
from ..core.config import settings

ALGORITHM = "HS256"


def create_access_token(sub: str, claims: dict[str, Any] | None = None, minutes: int | None = None) -> str:
    exp_min = minutes if minutes is not None else settings.ACCESS_TOKEN_MIN
    expire = datetime.now(timezone.utc) + timedelta(minutes=exp_min)
    payload = {**(claims or {}), "sub": sub, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """Raises jwt.PyJWTError for a bad signature, expiry or malformed token."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
