"""Reusable FastAPI dependencies resolving the services built at startup."""
from typing import Optional

from fastapi import Depends, Header, Request

from .accounts import AccountDirectory
from .attachments import AttachmentStore
from .container import PortalContainer
from .courses import CourseCatalog
from .errors import Forbidden, NotFound
from .faults import FaultModeration
from .records import AnnouncementBoard, DriverLogBook, LocationGallery


def get_container(request: Request) -> PortalContainer:
    return request.app.state.container


def get_accounts(container: PortalContainer = Depends(get_container)) -> AccountDirectory:
    return container.accounts


def get_attachments(container: PortalContainer = Depends(get_container)) -> AttachmentStore:
    return container.attachments


def get_fault_moderation(container: PortalContainer = Depends(get_container)) -> FaultModeration:
    return container.faults


def get_course_catalog(container: PortalContainer = Depends(get_container)) -> CourseCatalog:
    return container.courses


def get_driver_log(container: PortalContainer = Depends(get_container)) -> DriverLogBook:
    return container.drivers


def get_announcements(container: PortalContainer = Depends(get_container)) -> AnnouncementBoard:
    return container.announcements


def get_locations(container: PortalContainer = Depends(get_container)) -> LocationGallery:
    return container.locations


def require_moderator(
    x_portal_user: Optional[str] = Header(None, alias="X-Portal-User"),
    container: PortalContainer = Depends(get_container),
) -> Optional[str]:
    """Gate moderation routes when ``require_moderator_for_approval`` is on."""

    if not container.settings.require_moderator_for_approval:
        return x_portal_user
    try:
        allowed = x_portal_user is not None and container.accounts.is_administrator(x_portal_user)
    except NotFound:
        allowed = False
    if not allowed:
        raise Forbidden("Access denied. Admin only.")
    return x_portal_user
