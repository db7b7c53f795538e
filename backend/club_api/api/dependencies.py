"""Request Dependencies - per-request DataAccess, services and pagination params.

Invariants:
    - One DataAccess per request, bound to the request's AsyncSession (get_db)
    - limit defaults to settings.default_page_size and is capped at settings.max_page_size
"""

from dataclasses import dataclass

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from club_api.config import get_settings
from club_api.infrastructure.data_access import DataAccess
from club_api.infrastructure.database import get_db
from club_api.services.announcement_service import AnnouncementService
from club_api.services.event_service import EventService
from club_api.services.join_application_service import JoinApplicationService
from club_api.services.task_service import TaskService
from club_api.services.user_service import UserService


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int


def get_data_access(db: AsyncSession = Depends(get_db)) -> DataAccess:
    return DataAccess(db)


def page_params(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> PageParams:
    settings = get_settings()
    size = limit or settings.default_page_size
    return PageParams(page=page, limit=min(size, settings.max_page_size))


def get_join_application_service(
    data: DataAccess = Depends(get_data_access),
) -> JoinApplicationService:
    return JoinApplicationService(data)


def get_event_service(data: DataAccess = Depends(get_data_access)) -> EventService:
    return EventService(data)


def get_task_service(data: DataAccess = Depends(get_data_access)) -> TaskService:
    return TaskService(data)


def get_announcement_service(
    data: DataAccess = Depends(get_data_access),
) -> AnnouncementService:
    return AnnouncementService(data)


def get_user_service(data: DataAccess = Depends(get_data_access)) -> UserService:
    return UserService(data, bcrypt_rounds=get_settings().bcrypt_rounds)
