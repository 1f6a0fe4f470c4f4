from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from portal.courses import CourseCatalog
from portal.dependencies import get_course_catalog
from portal.models import Course
from portal.rate_limit import limiter
from portal.schemas import CourseListRequest, CourseRead, CreatedResponse

from ..uploads import read_upload

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("/file", response_model=CreatedResponse)
@limiter.limit("10/minute")
def upload_course_file(
    request: Request,
    title: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    catalog: CourseCatalog = Depends(get_course_catalog),
) -> CreatedResponse:
    course = catalog.submit_by_file(title, department, read_upload(file))
    return CreatedResponse(id=course.id)


@router.post("/manual", response_model=CreatedResponse)
@limiter.limit("10/minute")
def create_course_manually(
    request: Request,
    title: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    catalog: CourseCatalog = Depends(get_course_catalog),
) -> CreatedResponse:
    course = catalog.submit_manually(title, department, content, read_upload(file))
    return CreatedResponse(id=course.id)


@router.post("", response_model=List[CourseRead])
@limiter.limit("60/minute")
def list_courses(
    request: Request,
    query: CourseListRequest,
    catalog: CourseCatalog = Depends(get_course_catalog),
) -> List[Course]:
    return catalog.list_courses(query.role)
