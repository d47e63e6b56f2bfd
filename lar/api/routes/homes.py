from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from ...schemas.common import MessageOut
from ...schemas.home import HomeCreate, HomeCreatedOut, HomeDetailOut, HomeOut
from ...schemas.user import UserOut
from ...services.home_service import create_home, get_home, get_home_with_members, get_home_members, join_home
from ...services.user_service import get_home_ranking
from ...models.user import User
from ..deps import get_db, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=HomeCreatedOut)
def create(payload: HomeCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    try:
        home = create_home(db, name=payload.name, created_by=current.id)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return HomeCreatedOut(home=HomeOut.model_validate(home), message="Home successfully created!")


# Readable by non-members too: the invite page shows the home before joining
@router.get("/{home_id}", response_model=HomeDetailOut)
def get_one(home_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    home = get_home_with_members(db, home_id)
    if not home:
        raise HTTPException(404, "Home not found")
    return home


@router.get("/{home_id}/members", response_model=list[UserOut])
def members(home_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    if not get_home(db, home_id):
        raise HTTPException(404, "Home not found")
    return get_home_members(db, home_id)


@router.post("/{home_id}/join", response_model=MessageOut)
def join(home_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    if not get_home(db, home_id):
        logger.warning(f"User {current.id} tried to join missing home {home_id}")
        raise HTTPException(404, "Home not found")
    join_home(db, user_id=current.id, home_id=home_id)
    return MessageOut(message="Joined home successfully!")


@router.get("/{home_id}/ranking", response_model=list[UserOut])
def ranking(home_id: str, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return get_home_ranking(db, home_id)
