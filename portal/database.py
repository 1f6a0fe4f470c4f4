"""SQLAlchemy engines and sessions, one storage partition per entity family."""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, TypeVar

from sqlalchemy import Select, Table, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import Settings
from .errors import StorageError

PARTITION_NAMES = ("users", "faults", "courses", "drivers", "messages", "locations")

T = TypeVar("T")


class Base(DeclarativeBase):
    pass


class Partition:
    """An independent database holding exactly one table.

    Each operation opens its own short-lived session, so every write is a
    single commit against this partition only.
    """

    def __init__(self, name: str, url: str, tables: Sequence[Table]) -> None:
        self.name = name
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine = create_engine(url, connect_args=connect_args)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        self.tables = list(tables)

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine, tables=self.tables)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine, tables=self.tables)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as exc:
            db.rollback()
            detail = exc.orig if getattr(exc, "orig", None) is not None else exc
            raise StorageError(str(detail)) from exc
        finally:
            db.close()

    def add(self, record: T) -> T:
        with self.session() as db:
            db.add(record)
            db.commit()
            db.refresh(record)
        return record

    def all(self, statement: Select) -> List:
        with self.session() as db:
            return list(db.scalars(statement).all())

    def first(self, statement: Select):
        with self.session() as db:
            return db.scalars(statement).first()


class Partitions:
    """The six partitions, built once at process start."""

    def __init__(self, partitions: Dict[str, Partition]) -> None:
        self._partitions = partitions

    def __getitem__(self, name: str) -> Partition:
        return self._partitions[name]

    def __iter__(self) -> Iterator[Partition]:
        return iter(self._partitions.values())

    def create_all(self) -> None:
        for partition in self:
            partition.create_all()

    def drop_all(self) -> None:
        for partition in self:
            partition.drop_all()

    def dispose(self) -> None:
        for partition in self:
            partition.engine.dispose()


def build_partitions(settings: Settings) -> Partitions:
    # Registers every table on Base.metadata.
    from . import models  # noqa: F401

    if settings.database_url_template.startswith("sqlite"):
        Path(settings.data_dir).mkdir(parents=True, exist_ok=True)

    return Partitions(
        {
            name: Partition(name, settings.partition_url(name), [Base.metadata.tables[name]])
            for name in PARTITION_NAMES
        }
    )
