"""Driver logs, announcements and location photos."""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from portal.dependencies import get_announcements, get_driver_log, get_locations
from portal.models import Announcement, DriverLog, LocationPhoto
from portal.rate_limit import limiter
from portal.records import AnnouncementBoard, DriverLogBook, LocationGallery
from portal.schemas import (
    AnnouncementCreate,
    AnnouncementRead,
    CreatedResponse,
    DriverLogCreate,
    DriverLogRead,
    LocationPhotoRead,
)

from ..uploads import read_upload

router = APIRouter(tags=["records"])


@router.post("/drivers", response_model=CreatedResponse)
@limiter.limit("30/minute")
def add_driver_log(
    request: Request,
    entry: DriverLogCreate,
    drivers: DriverLogBook = Depends(get_driver_log),
) -> CreatedResponse:
    return CreatedResponse(id=drivers.record(entry.date, entry.name).id)


@router.get("/drivers/{date}", response_model=List[DriverLogRead])
@limiter.limit("60/minute")
def drivers_for_date(
    request: Request,
    date: str,
    drivers: DriverLogBook = Depends(get_driver_log),
) -> List[DriverLog]:
    return drivers.for_date(date)


@router.post("/messages", response_model=CreatedResponse)
@limiter.limit("30/minute")
def post_message(
    request: Request,
    message: AnnouncementCreate,
    board: AnnouncementBoard = Depends(get_announcements),
) -> CreatedResponse:
    return CreatedResponse(id=board.post(message.title, message.content, message.created_by).id)


@router.get("/messages", response_model=List[AnnouncementRead])
@limiter.limit("60/minute")
def list_messages(
    request: Request,
    board: AnnouncementBoard = Depends(get_announcements),
) -> List[Announcement]:
    return board.newest_first()


@router.post("/locations", response_model=CreatedResponse)
@limiter.limit("20/minute")
def add_location(
    request: Request,
    department: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    gallery: LocationGallery = Depends(get_locations),
) -> CreatedResponse:
    return CreatedResponse(id=gallery.add(department, title, read_upload(image)).id)


@router.get("/locations/{department}", response_model=List[LocationPhotoRead])
@limiter.limit("60/minute")
def locations_for_department(
    request: Request,
    department: str,
    gallery: LocationGallery = Depends(get_locations),
) -> List[LocationPhoto]:
    return gallery.for_department(department)
