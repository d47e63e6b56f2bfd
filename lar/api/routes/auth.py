from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging
from ...schemas.auth import DevLoginIn, TokenOut
from ...schemas.user import UserOut
from ...services.user_service import upsert_user
from ...services.security import create_access_token
from ...models.user import User
from ...core.config import settings
from ..deps import get_db, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/token", response_model=TokenOut)
def token(payload: DevLoginIn, db: Session = Depends(get_db)):
    """Development sign-in: trusts the posted identity and issues a token for it."""
    if not settings.DEV_LOGIN:
        raise HTTPException(404, "Not found")
    fields = payload.model_dump(exclude_unset=True, exclude={"id"})
    try:
        user = upsert_user(db, id=payload.id, **fields)
    except IntegrityError:
        logger.warning(f"Dev login failed: email already in use - {payload.email}")
        raise HTTPException(400, "Email already in use")
    logger.info(f"Dev login for user {user.id}")
    return TokenOut(access_token=create_access_token(user.id))


@router.get("/user", response_model=UserOut)
def auth_user(current: User = Depends(get_current_user)):
    return current
