from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tasktracker import store
from tasktracker.schemas.task import TaskCompletion, TaskCreate, TaskOut, MessageOut
from tasktracker.database import get_db

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskOut])
def list_tasks(db: Session = Depends(get_db)):
    return store.list_tasks(db)


@router.post("", response_model=TaskOut, status_code=201)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    return store.create_task(db, task.title)


@router.patch("/{task_id}", response_model=TaskOut)
def update_task(task_id: int, body: TaskCompletion, db: Session = Depends(get_db)):
    """Overwrite the completed flag; nothing else on a task is mutable."""
    return store.set_completion(db, task_id, body.completed)


@router.delete("/{task_id}", response_model=MessageOut)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    store.delete_task(db, task_id)
    return {"message": "Task deleted"}
