from typing import Generator, Optional
import logging
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import jwt
from ..db.session import SessionLocal
from ..models.user import User
from ..services.security import decode_access_token
from ..services.user_service import UPSERT_FIELDS, get_user, upsert_user

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

# token claims copied onto the user row created on first authentication
CLAIM_FIELDS = UPSERT_FIELDS


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected token: {str(e)}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    user_id: Optional[str] = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    user = get_user(db, user_id)
    if user is None:
        fields = {claim: payload[claim] for claim in CLAIM_FIELDS if claim in payload}
        try:
            user = upsert_user(db, id=user_id, **fields)
        except IntegrityError:
            # email is the only unique column besides the id; upsert_user has rolled back
            logger.warning(f"First sign-in for {user_id} rejected: email already in use - {fields.get('email')}")
            raise HTTPException(400, "Email already in use")
    return user


def require_home(current: User = Depends(get_current_user)) -> str:
    if not current.home_id:
        raise HTTPException(400, "You must be part of a home to manage tasks")
    return current.home_id
