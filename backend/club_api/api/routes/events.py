"""Event Routes - event CRUD, registration and registration roll-up."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from club_api.api.dependencies import PageParams, get_event_service, page_params
from club_api.services.event_service import EventService

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("")
async def list_events(
    status_filter: str | None = Query(None, alias="status"),
    active: str | None = Query(None),
    department: str | None = Query(None),
    upcoming: str | None = Query(None),
    paging: PageParams = Depends(page_params),
    service: EventService = Depends(get_event_service),
):
    """List events by date, soonest first."""
    return await service.list_all(
        status_filter, active, department, upcoming, paging.page, paging.limit,
    )


@router.get("/{event_id}")
async def get_event(event_id: UUID, service: EventService = Depends(get_event_service)):
    return await service.get(event_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: Any = Body(None), service: EventService = Depends(get_event_service),
):
    return await service.create(payload)


@router.put("/{event_id}")
async def update_event(
    event_id: UUID,
    payload: Any = Body(None),
    service: EventService = Depends(get_event_service),
):
    return await service.update(event_id, payload)


@router.delete("/{event_id}")
async def delete_event(event_id: UUID, service: EventService = Depends(get_event_service)):
    """Delete an event; its registrations go with it."""
    return await service.delete(event_id)


@router.post("/{event_id}/register", status_code=status.HTTP_201_CREATED)
async def register_for_event(
    event_id: UUID,
    payload: Any = Body(None),
    service: EventService = Depends(get_event_service),
):
    return await service.register(event_id, payload)


@router.get("/{event_id}/registrations")
async def list_event_registrations(
    event_id: UUID, service: EventService = Depends(get_event_service),
):
    return await service.registrations(event_id)
