from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from ...models.user import User
from ...schemas.task import TaskCompletedOut, TaskCreate, TaskOut, TaskUpdate
from ...services.task_service import (
    create_task,
    complete_task,
    get_task,
    get_tasks,
    get_user_tasks,
    update_task,
)
from ..deps import get_db, get_current_user, require_home

logger = logging.getLogger(__name__)

router = APIRouter()


# ------------------------------------------------------------------------
# Create a task in the caller's home
# ------------------------------------------------------------------------
@router.post("", response_model=TaskOut)
def create(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    home_id: str = Depends(require_home),
):
    try:
        t = create_task(
            db,
            home_id=home_id,
            created_by=current.id,
            assigned_to=payload.assigned_to,
            title=payload.title,
            description=payload.description,
            deadline=payload.deadline,
            priority=payload.priority,
            points=payload.points,
        )
    except ValueError as e:
        logger.warning(f"Task creation rejected for user {current.id}: {str(e)}")
        raise HTTPException(400, str(e))
    return get_task(db, t.id)


# ------------------------------------------------------------------------
# All tasks of the caller's home, newest first
# ------------------------------------------------------------------------
@router.get("", response_model=List[TaskOut])
def home_tasks(
    db: Session = Depends(get_db),
    home_id: str = Depends(require_home),
):
    return get_tasks(db, home_id)


# ------------------------------------------------------------------------
# Tasks assigned to the caller
# ------------------------------------------------------------------------
@router.get("/my", response_model=List[TaskOut])
def my_tasks(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return get_user_tasks(db, current.id)


@router.get("/{task_id}", response_model=TaskOut)
def get_one(
    task_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    task = get_task(db, task_id)
    # tasks of other homes are reported as missing
    if not task or task.home_id != current.home_id:
        raise HTTPException(404, "Task not found")
    return task


# ------------------------------------------------------------------------
# Edit a task (creator only)
# ------------------------------------------------------------------------
@router.patch("/{task_id}", response_model=TaskOut)
def edit(
    task_id: int,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    task = get_task(db, task_id)
    if not task:
        raise HTTPException(404, "Task not found")
    if task.created_by != current.id:
        logger.warning(f"User {current.id} tried to edit task {task_id} created by {task.created_by}")
        raise HTTPException(403, "Only the task creator can edit it")

    try:
        t = update_task(db, task_id, **payload.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not t:
        raise HTTPException(404, "Task not found")
    return t


# ------------------------------------------------------------------------
# Complete a task; only its assignee can
# ------------------------------------------------------------------------
@router.post("/{task_id}/complete", response_model=TaskCompletedOut)
def complete(
    task_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    task = complete_task(db, task_id, current.id)
    if not task:
        logger.warning(f"User {current.id} could not complete task {task_id}")
        raise HTTPException(404, "Task not found, already completed or not assigned to you")
    return TaskCompletedOut(
        task=TaskOut.model_validate(task),
        message="Task completed successfully! Points awarded!",
    )
