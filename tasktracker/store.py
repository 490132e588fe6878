"""Task persistence.

Every operation takes the SQLAlchemy session it should run on; nothing here
holds on to a global engine or pool. Each call touches at most one row and
commits (or rolls back) before returning.
"""
import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.errors import NotFoundError, StorageError, ValidationError
from tasktracker.models.task import Task
from tasktracker.schemas.task import clean_title

logger = logging.getLogger(__name__)


@contextmanager
def _storage(db: Session, action: str):
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Storage failure while trying to %s", action)
        raise StorageError(f"could not {action}") from exc


def list_tasks(db: Session) -> List[Task]:
    """All tasks, most recently created first."""
    with _storage(db, "list tasks"):
        # id breaks ties between rows created within the same timestamp tick
        return db.query(Task).order_by(Task.created_at.desc(), Task.id.desc()).all()


def create_task(db: Session, title) -> Task:
    try:
        title = clean_title(title)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    with _storage(db, "create task"):
        new = Task(title=title, completed=False)
        db.add(new)
        db.commit()
        db.refresh(new)
    logger.info("Created task %s", new.id)
    return new


def _get_task(db: Session, task_id: int) -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if task is None:
        raise NotFoundError(task_id)
    return task


def set_completion(db: Session, task_id: int, completed) -> Task:
    if not isinstance(completed, bool):
        raise ValidationError("completed must be a boolean")

    with _storage(db, "update task"):
        task = _get_task(db, task_id)
        task.completed = completed
        db.commit()
        db.refresh(task)
    logger.info("Task %s completed=%s", task_id, completed)
    return task


def delete_task(db: Session, task_id: int) -> None:
    with _storage(db, "delete task"):
        task = _get_task(db, task_id)
        db.delete(task)
        db.commit()
    logger.info("Deleted task %s", task_id)
