from sqlalchemy.orm import Session
from sqlalchemy import select, update
import logging
from ..models.user import User
from ..models import utcnow

logger = logging.getLogger(__name__)

UPSERT_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


def get_user(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)


def upsert_user(db: Session, *, id: str, **fields) -> User:
    """Insert the user, or merge the given fields into the existing row.

    Only keys present in ``fields`` are written, so a partial profile update
    never clears the others.
    """
    unknown = set(fields) - set(UPSERT_FIELDS)
    if unknown:
        raise ValueError(f"Unknown user fields: {', '.join(sorted(unknown))}")
    try:
        user = db.get(User, id)
        if user is None:
            user = User(id=id, **fields)
            db.add(user)
            logger.info(f"Creating user: id={id}, email={fields.get('email')}")
        else:
            for key, value in fields.items():
                setattr(user, key, value)
        user.updated_at = utcnow()
        db.commit()
        db.refresh(user)
        return user
    except Exception as e:
        logger.error(f"Error upserting user {id}: {str(e)}", exc_info=True)
        db.rollback()
        raise


def update_user_points(db: Session, user_id: str, delta: int, *, commit: bool = True) -> User | None:
    """Add ``delta`` to the stored total with a relative SQL update."""
    if delta < 0:
        raise ValueError("Points can only be added")
    result = db.execute(
        update(User)
        .where(User.id == user_id)
        .values(points=User.points + delta, updated_at=utcnow())
    )
    if result.rowcount == 0:
        return None
    if commit:
        db.commit()
    user = db.get(User, user_id)
    db.refresh(user)
    logger.info(f"Awarded {delta} points to user {user_id}, total={user.points}")
    return user


def get_home_ranking(db: Session, home_id: str) -> list[User]:
    # ties: earliest member first, then id, so the order is stable across calls
    stmt = (
        select(User)
        .where(User.home_id == home_id)
        .order_by(User.points.desc(), User.created_at.asc(), User.id.asc())
    )
    return list(db.execute(stmt).scalars())
