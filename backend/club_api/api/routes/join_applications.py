"""Join Application Routes - public submission, admin listing and review.

Invariants:
    - POST is public; listing/detail/status are admin operations (not enforced yet)
    - Bodies are read raw and validated in the service (all-or-nothing)
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from club_api.api.dependencies import PageParams, get_join_application_service, page_params
from club_api.services.join_application_service import JoinApplicationService

router = APIRouter(prefix="/api/join", tags=["join"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_application(
    payload: Any = Body(None),
    service: JoinApplicationService = Depends(get_join_application_service),
):
    """Submit a membership application."""
    return await service.submit(payload)


@router.get("")
async def list_applications(
    status_filter: str | None = Query(None, alias="status"),
    paging: PageParams = Depends(page_params),
    service: JoinApplicationService = Depends(get_join_application_service),
):
    """List applications, newest first."""
    return await service.list_all(status_filter, paging.page, paging.limit)


@router.get("/{application_id}")
async def get_application(
    application_id: UUID,
    service: JoinApplicationService = Depends(get_join_application_service),
):
    return await service.get(application_id)


@router.put("/{application_id}/status")
async def update_application_status(
    application_id: UUID,
    payload: Any = Body(None),
    service: JoinApplicationService = Depends(get_join_application_service),
):
    """Approve, reject or reset an application to pending."""
    return await service.update_status(application_id, payload)
