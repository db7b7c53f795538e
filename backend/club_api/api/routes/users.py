"""User Routes - directory, profile edits and account provisioning.

Invariants:
    - No response ever contains password_hash (core/format_resources.py)
    - Admin bootstrap is not exposed here; see club_api.seed_admin
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status

from club_api.api.dependencies import PageParams, get_user_service, page_params
from club_api.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(
    role: str | None = Query(None),
    department: str | None = Query(None),
    active: str | None = Query(None),
    paging: PageParams = Depends(page_params),
    service: UserService = Depends(get_user_service),
):
    return await service.list_all(role, department, active, paging.page, paging.limit)


@router.get("/{user_id}")
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return await service.get(user_id)


@router.put("/{user_id}")
async def update_user(
    user_id: UUID,
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
):
    """Update the self-editable profile fields."""
    return await service.update(user_id, payload)


@router.post("", status_code=status.HTTP_201_CREATED)
async def provision_user(
    payload: Any = Body(None), service: UserService = Depends(get_user_service),
):
    """Create an account from email + password and optional profile overrides."""
    return await service.provision(payload)
