import logging
from sqlalchemy import select, update
from sqlalchemy.orm import Session, aliased, contains_eager

from ..models.task import Task, TaskPriority, TaskStatus
from ..models.user import User
from ..models import utcnow
from .user_service import update_user_points

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "deadline", "priority", "points", "assigned_to")
# columns that may be set back to NULL through an update
NULLABLE_FIELDS = ("description", "deadline")


def _with_relations():
    """Task joined with creator, assignee and home.

    Inner joins: a task whose creator, assignee or home is missing is left out.
    """
    creator = aliased(User)
    assignee = aliased(User)
    return (
        select(Task)
        .join(Task.creator.of_type(creator))
        .join(Task.assignee.of_type(assignee))
        .join(Task.home)
        .options(
            contains_eager(Task.creator.of_type(creator)),
            contains_eager(Task.assignee.of_type(assignee)),
            contains_eager(Task.home),
        )
    )


def _ensure_in_home(db: Session, user_id: str, home_id: str) -> None:
    user = db.get(User, user_id)
    if not user or user.home_id != home_id:
        raise ValueError("Assignee is not a member of this home")


def create_task(
    db: Session, *,
    home_id: str,
    created_by: str,
    assigned_to: str,
    title: str,
    description: str | None = None,
    deadline=None,
    priority: TaskPriority = TaskPriority.MEDIUM,
    points: int = 5,
) -> Task:
    _ensure_in_home(db, assigned_to, home_id)
    t = Task(
        home_id=home_id,
        created_by=created_by,
        assigned_to=assigned_to,
        title=title,
        description=description,
        deadline=deadline,
        priority=priority,
        points=points,
        status=TaskStatus.PENDING,
    )
    db.add(t)
    db.commit()
    db.refresh(t)
    logger.info(f"Task created: id={t.id}, home={home_id}, assigned_to={assigned_to}, points={points}")
    return t


def get_tasks(db: Session, home_id: str) -> list[Task]:
    stmt = (
        _with_relations()
        .where(Task.home_id == home_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(db.execute(stmt).unique().scalars())


def get_task(db: Session, task_id: int) -> Task | None:
    stmt = _with_relations().where(Task.id == task_id)
    return db.execute(stmt).unique().scalar_one_or_none()


def get_user_tasks(db: Session, user_id: str) -> list[Task]:
    stmt = (
        _with_relations()
        .where(Task.assigned_to == user_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    )
    return list(db.execute(stmt).unique().scalars())


def update_task(db: Session, task_id: int, **changes) -> Task | None:
    """Apply a partial update. Authorization is the caller's job."""
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
    for key, value in changes.items():
        if value is None and key not in NULLABLE_FIELDS:
            raise ValueError(f"{key} cannot be empty")

    task = db.get(Task, task_id)
    if not task:
        return None
    if task.status == TaskStatus.COMPLETED:
        raise ValueError("Task is locked after completion and cannot be edited.")
    if "assigned_to" in changes:
        _ensure_in_home(db, changes["assigned_to"], task.home_id)

    for key, value in changes.items():
        setattr(task, key, value)
    task.updated_at = utcnow()
    db.commit()
    logger.info(f"Task {task_id} updated: fields={sorted(changes)}")
    return get_task(db, task_id)


def complete_task(db: Session, task_id: int, user_id: str) -> Task | None:
    """Mark a pending task completed and credit its points to the assignee.

    The match on assignee and status is part of the UPDATE itself. Both writes
    commit together; returns None when nothing matched.
    """
    now = utcnow()
    try:
        result = db.execute(
            update(Task)
            .where(
                Task.id == task_id,
                Task.assigned_to == user_id,
                Task.status == TaskStatus.PENDING,
            )
            .values(status=TaskStatus.COMPLETED, completed_at=now, updated_at=now)
        )
        if result.rowcount == 0:
            db.rollback()
            return None
        points = db.execute(select(Task.points).where(Task.id == task_id)).scalar_one()
        update_user_points(db, user_id, points, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Task {task_id} completed by {user_id}, {points} points awarded")
    return get_task(db, task_id)
