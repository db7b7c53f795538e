"""Announcement Routes - list, read, write and remove club announcements."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from club_api.api.dependencies import PageParams, get_announcement_service, page_params
from club_api.services.announcement_service import AnnouncementService

router = APIRouter(prefix="/api/announcements", tags=["announcements"])


@router.get("")
async def list_announcements(
    category: str | None = Query(None),
    important: str | None = Query(None),
    target_audience: str | None = Query(None, alias="targetAudience"),
    department: str | None = Query(None),
    paging: PageParams = Depends(page_params),
    service: AnnouncementService = Depends(get_announcement_service),
):
    return await service.list_all(
        category, important, target_audience, department, paging.page, paging.limit,
    )


@router.get("/{announcement_id}")
async def get_announcement(
    announcement_id: UUID,
    service: AnnouncementService = Depends(get_announcement_service),
):
    return await service.get(announcement_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_announcement(
    payload: Any = Body(None),
    service: AnnouncementService = Depends(get_announcement_service),
):
    return await service.create(payload)


@router.put("/{announcement_id}")
async def update_announcement(
    announcement_id: UUID,
    payload: Any = Body(None),
    service: AnnouncementService = Depends(get_announcement_service),
):
    return await service.update(announcement_id, payload)


@router.delete("/{announcement_id}")
async def delete_announcement(
    announcement_id: UUID,
    service: AnnouncementService = Depends(get_announcement_service),
):
    return await service.delete(announcement_id)
