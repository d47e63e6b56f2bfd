from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...schemas.user import UserOut, UserUpdate
from ...models.user import User
from ...services.user_service import upsert_user
from ..deps import get_db, get_current_user

router = APIRouter()


@router.get("/me", response_model=UserOut)
def me(current: User = Depends(get_current_user)):
    return current


# Update profile fields (name, picture)
@router.patch("/me", response_model=UserOut)
def update_me(
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return upsert_user(db, id=current.id, **payload.model_dump(exclude_unset=True))
