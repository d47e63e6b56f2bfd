import secrets
import logging
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy import select, update
from ..models.home import Home
from ..models.user import User
from ..models import utcnow

logger = logging.getLogger(__name__)

# same alphabet and length as nanoid's default ids
HOME_ID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
HOME_ID_LENGTH = 21


def _home_id(n=HOME_ID_LENGTH) -> str:
    return "".join(secrets.choice(HOME_ID_ALPHABET) for _ in range(n))


def create_home(db: Session, *, name: str, created_by: str) -> Home:
    if db.get(User, created_by) is None:
        raise ValueError("Home creator does not exist")
    try:
        home = Home(id=_home_id(), name=name, created_by=created_by)
        db.add(home)
        db.flush()
        db.execute(
            update(User)
            .where(User.id == created_by)
            .values(home_id=home.id, updated_at=utcnow())
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(home)
    logger.info(f"Home created: id={home.id}, name={home.name}, created_by={created_by}")
    return home


def get_home(db: Session, home_id: str) -> Home | None:
    return db.get(Home, home_id)


def get_home_with_members(db: Session, home_id: str) -> Home | None:
    stmt = (
        select(Home)
        .options(selectinload(Home.members), joinedload(Home.creator))
        .where(Home.id == home_id)
    )
    return db.execute(stmt).scalar_one_or_none()


def get_home_members(db: Session, home_id: str) -> list[User]:
    stmt = select(User).where(User.home_id == home_id).order_by(User.created_at, User.id)
    return list(db.execute(stmt).scalars())


def join_home(db: Session, *, user_id: str, home_id: str) -> None:
    # no invite bookkeeping: knowing the home id is the invitation
    db.execute(
        update(User)
        .where(User.id == user_id)
        .values(home_id=home_id, updated_at=utcnow())
    )
    db.commit()
    logger.info(f"User {user_id} joined home {home_id}")
