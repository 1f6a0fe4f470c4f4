"""Account directory: credential checks, administrator policy and user creation."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from .database import Partition
from .errors import Conflict, Forbidden, NotFound, Unauthorized
from .models import RoleEnum, User

logger = logging.getLogger(__name__)

ADMINISTRATIVE_ROLES = frozenset(
    {
        RoleEnum.TECH_ADMIN.value,
        RoleEnum.CALL_ADMIN.value,
        RoleEnum.APP_ADMIN.value,
        RoleEnum.SYS_ADMIN.value,
        RoleEnum.STUDENT_ADMIN.value,
    }
)

DEFAULT_ACCOUNTS = (
    ("student", "123456", RoleEnum.STUDENT),
    ("adminT", "123456", RoleEnum.TECH_ADMIN),
    ("adminM", "123456", RoleEnum.CALL_ADMIN),
    ("adminA", "123456", RoleEnum.APP_ADMIN),
    ("adminS", "123456", RoleEnum.SYS_ADMIN),
    ("admin", "123456", RoleEnum.STUDENT_ADMIN),
)


class AccountDirectory:
    def __init__(self, partition: Partition) -> None:
        self._partition = partition

    def get_user(self, username: Optional[str]) -> Optional[User]:
        if username is None:
            return None
        return self._partition.first(select(User).where(User.username == username))

    def authenticate(self, username: Optional[str], password: Optional[str]) -> str:
        """Return the stored role when the credential matches exactly."""

        user = self.get_user(username)
        if user is None or password is None or user.password != password:
            raise Unauthorized("Invalid credentials")
        return user.role

    def is_administrator(self, username: Optional[str]) -> bool:
        user = self.get_user(username)
        if user is None:
            raise NotFound(f"User '{username}' not found")
        return user.role in ADMINISTRATIVE_ROLES

    def create_user(self, requester: Optional[str], username: str, password: str, role: RoleEnum | str) -> User:
        try:
            allowed = self.is_administrator(requester)
        except NotFound:
            allowed = False
        if not allowed:
            raise Forbidden("Access denied. Admin only.")

        if self.get_user(username) is not None:
            raise Conflict(f"User '{username}' already exists")

        user = User(username=username, password=password, role=RoleEnum(role).value)
        with self._partition.session() as db:
            db.add(user)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise Conflict(f"User '{username}' already exists") from exc
            db.refresh(user)
        logger.info("User %s created by %s with role %s", username, requester, user.role)
        return user

    def seed_defaults(self) -> int:
        """Insert any missing bootstrap account; existing ones are left untouched."""

        created = 0
        with self._partition.session() as db:
            for username, password, role in DEFAULT_ACCOUNTS:
                exists = db.scalars(select(User.id).where(User.username == username)).first()
                if exists is None:
                    db.add(User(username=username, password=password, role=role.value))
                    created += 1
            db.commit()
        if created:
            logger.info("Seeded %d default account(s)", created)
        return created
