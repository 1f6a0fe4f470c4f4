"""Fault report moderation.

A report is created pending and becomes publicly listable only after an
explicit approval. Approval is the single, irreversible transition; there is
no rejection, edit or delete.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from sqlalchemy import select, update

from .database import Partition
from .models import FaultReport

logger = logging.getLogger(__name__)


class ApprovalOutcome(str, Enum):
    UPDATED = "updated"
    NOT_FOUND = "not_found"
    ALREADY_APPROVED = "already_approved"

    @property
    def updated_count(self) -> int:
        return 1 if self is ApprovalOutcome.UPDATED else 0


class FaultModeration:
    def __init__(self, partition: Partition) -> None:
        self._partition = partition

    def submit(
        self,
        username: Optional[str],
        issue: Optional[str],
        solution: Optional[str],
        media: Optional[str] = None,
    ) -> FaultReport:
        report = self._partition.add(
            FaultReport(username=username, issue=issue, solution=solution, media=media, approved=False)
        )
        logger.info("Fault report %s submitted by %s", report.id, username)
        return report

    def list_approved(self) -> List[FaultReport]:
        return self._partition.all(
            select(FaultReport).where(FaultReport.approved.is_(True)).order_by(FaultReport.id.desc())
        )

    def list_pending(self) -> List[FaultReport]:
        return self._partition.all(select(FaultReport).where(FaultReport.approved.is_(False)))

    def get(self, report_id: int) -> Optional[FaultReport]:
        return self._partition.first(select(FaultReport).where(FaultReport.id == report_id))

    def approve(self, report_id: int) -> ApprovalOutcome:
        # Guarded update: only a pending row can change, so concurrent approvals
        # of the same report yield exactly one UPDATED.
        statement = (
            update(FaultReport)
            .where(FaultReport.id == report_id, FaultReport.approved.is_(False))
            .values(approved=True)
            .execution_options(synchronize_session=False)
        )
        with self._partition.session() as db:
            changed = db.execute(statement).rowcount
            db.commit()

        if changed:
            outcome = ApprovalOutcome.UPDATED
        elif self.get(report_id) is not None:
            outcome = ApprovalOutcome.ALREADY_APPROVED
        else:
            outcome = ApprovalOutcome.NOT_FOUND
        logger.info("Approval of fault report %s: %s", report_id, outcome.value)
        return outcome
