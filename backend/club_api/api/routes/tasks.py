"""Task Routes - assignment, progress updates, cleanup.

Invariants:
    - PUT accepts any JSON object; unknown or invalid fields are ignored, never rejected
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from club_api.api.dependencies import PageParams, get_task_service, page_params
from club_api.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def list_tasks(
    assigned_to: UUID | None = Query(None, alias="assignedTo"),
    assigned_by: UUID | None = Query(None, alias="assignedBy"),
    status_filter: str | None = Query(None, alias="status"),
    priority: str | None = Query(None),
    department: str | None = Query(None),
    paging: PageParams = Depends(page_params),
    service: TaskService = Depends(get_task_service),
):
    return await service.list_all(
        assigned_to, assigned_by, status_filter, priority, department,
        paging.page, paging.limit,
    )


@router.get("/{task_id}")
async def get_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    return await service.get(task_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: Any = Body(None), service: TaskService = Depends(get_task_service),
):
    return await service.create(payload)


@router.put("/{task_id}")
async def update_task(
    task_id: UUID,
    payload: Any = Body(None),
    service: TaskService = Depends(get_task_service),
):
    """Partial update; progress 100 and status completed imply each other."""
    return await service.update(task_id, payload)


@router.delete("/{task_id}")
async def delete_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    return await service.delete(task_id)
