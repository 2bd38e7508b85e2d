import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session
from typing import List
from todolist.schemas.task import TaskIn, TaskOut
from todolist.models.task import Task
from todolist.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/todos", tags=["todos"])

# ids outside the 64-bit range never reach the driver
TASK_ID = Path(..., ge=1, le=2**63 - 1)


@router.get("", response_model=List[TaskOut])
def list_todos(db: Session = Depends(get_db)):
    """Every task, most recently created first. No pagination."""
    return db.query(Task).order_by(Task.id.desc()).all()


@router.get("/{task_id}", response_model=TaskOut)
def get_todo(task_id: int = TASK_ID, db: Session = Depends(get_db)):
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("", response_model=TaskOut, status_code=201)
def create_todo(task: TaskIn, db: Session = Depends(get_db)):
    new = Task(title=task.title, description=task.description)
    db.add(new)
    db.commit()
    db.refresh(new)
    logger.info("Task created: id=%s title=%r", new.id, new.title)
    return new


@router.put("/{task_id}", response_model=TaskOut)
def update_todo(task: TaskIn, task_id: int = TASK_ID, db: Session = Depends(get_db)):
    """Replace title and description of an existing task.

    Unknown ids answer 404 instead of an empty success.
    """
    existing = db.query(Task).filter(Task.id == task_id).first()
    if not existing:
        raise HTTPException(status_code=404, detail="Task not found")
    existing.title = task.title
    existing.description = task.description
    db.commit()
    db.refresh(existing)
    logger.info("Task updated: id=%s", existing.id)
    return existing


@router.delete("/{task_id}", status_code=204)
def delete_todo(task_id: int = TASK_ID, db: Session = Depends(get_db)):
    # deleting an id that does not exist is still a 204
    removed = db.query(Task).filter(Task.id == task_id).delete()
    db.commit()
    logger.info("Task delete: id=%s removed=%s", task_id, removed)
    return Response(status_code=204)
