from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from portal.attachments import AttachmentStore
from portal.dependencies import get_attachments, get_fault_moderation, require_moderator
from portal.faults import ApprovalOutcome, FaultModeration
from portal.models import FaultReport
from portal.rate_limit import limiter
from portal.schemas import ApprovalResponse, CreatedResponse, FaultReportRead

from ..uploads import read_upload

router = APIRouter(prefix="/faults", tags=["faults"])
_MAX_ROW_ID = 2**63 - 1


@router.post("", response_model=CreatedResponse)
@limiter.limit("20/minute")
def submit_fault(
    request: Request,
    username: Optional[str] = Form(None),
    issue: Optional[str] = Form(None),
    solution: Optional[str] = Form(None),
    media: Optional[UploadFile] = File(None),
    attachments: AttachmentStore = Depends(get_attachments),
    moderation: FaultModeration = Depends(get_fault_moderation),
) -> CreatedResponse:
    # A failed write raises before the report exists.
    media_url = attachments.store_optional(read_upload(media))
    report = moderation.submit(username, issue, solution, media_url)
    return CreatedResponse(id=report.id)


@router.get("", response_model=List[FaultReportRead])
@limiter.limit("60/minute")
def list_approved_faults(
    request: Request,
    moderation: FaultModeration = Depends(get_fault_moderation),
) -> List[FaultReport]:
    return moderation.list_approved()


@router.get("/pending", response_model=List[FaultReportRead])
@limiter.limit("60/minute")
def list_pending_faults(
    request: Request,
    _: Optional[str] = Depends(require_moderator),
    moderation: FaultModeration = Depends(get_fault_moderation),
) -> List[FaultReport]:
    return moderation.list_pending()


@router.post("/approve/{report_id}", response_model=ApprovalResponse)
@limiter.limit("30/minute")
def approve_fault(
    request: Request,
    report_id: str,
    _: Optional[str] = Depends(require_moderator),
    moderation: FaultModeration = Depends(get_fault_moderation),
) -> ApprovalResponse:
    # Any id is accepted; one that cannot name a report is simply not found.
    if report_id.isascii() and report_id.isdigit() and int(report_id) <= _MAX_ROW_ID:
        outcome = moderation.approve(int(report_id))
    else:
        outcome = ApprovalOutcome.NOT_FOUND
    return ApprovalResponse(updated=outcome.updated_count, outcome=outcome.value)
