"""Task routes.

Endpoints:
    GET    /api/tasks/                                   List (with filters)
    POST   /api/tasks/                                   Schedule from template
    GET    /api/tasks/{id}                               Detail
    PATCH  /api/tasks/{id}/subtasks/{sub_id}             Update a checklist item
    POST   /api/tasks/{id}/subtasks/{sub_id}/complete    Tick a checklist item
    PATCH  /api/tasks/{id}/status                        Set status manually
"""

from fastapi import APIRouter, Depends, Query

from app.deps import get_store
from app.models.enums import TaskStatus
from app.models.task import Task
from app.schemas.common import PaginatedResponse
from app.schemas.task import SubTaskUpdate, TaskDraft, TaskStatusUpdate
from app.services.store import InMemoryStore

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[Task])
async def list_tasks(
    team_id: str | None = None,
    status: TaskStatus | None = None,
    limit: int = Query(200, ge=1, le=500),
    offset: int = Query(0, ge=0),
    store: InMemoryStore = Depends(get_store),
):
    """List tasks ordered by assigned date."""
    tasks = store.list_tasks()
    if team_id:
        tasks = [t for t in tasks if t.team_id == team_id]
    if status:
        tasks = [t for t in tasks if t.status == status]
    tasks.sort(key=lambda t: t.assigned_on)

    return PaginatedResponse(
        items=tasks[offset:offset + limit],
        total=len(tasks),
        limit=limit,
        offset=offset,
    )


@router.post("/", response_model=Task, status_code=201)
async def create_task(
    body: TaskDraft,
    store: InMemoryStore = Depends(get_store),
):
    return store.create_task(body)


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    store: InMemoryStore = Depends(get_store),
):
    return store.get_task(task_id)


@router.patch("/{task_id}/subtasks/{sub_task_id}", response_model=Task)
async def update_sub_task(
    task_id: str,
    sub_task_id: str,
    body: SubTaskUpdate,
    store: InMemoryStore = Depends(get_store),
):
    return store.update_sub_task(task_id, sub_task_id, body)


@router.post("/{task_id}/subtasks/{sub_task_id}/complete", response_model=Task)
async def complete_sub_task(
    task_id: str,
    sub_task_id: str,
    store: InMemoryStore = Depends(get_store),
):
    return store.complete_sub_task(task_id, sub_task_id)


@router.patch("/{task_id}/status", response_model=Task)
async def set_task_status(
    task_id: str,
    body: TaskStatusUpdate,
    store: InMemoryStore = Depends(get_store),
):
    return store.set_task_status(task_id, body.status)
