"""SQLAlchemy-backed entry storage adapter."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Generator
from contextlib import contextmanager
from datetime import date

from sqlalchemy import Date, Engine, Integer, String, Text, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from worklog.core.entries import Entry, EntryType, validate_entry_fields
from worklog.core.errors import NotFoundError, WorklogError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


class EntryRow(Base):
    """A persisted journal entry."""

    __tablename__ = "entries"
    # Never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    def to_entry(self) -> Entry:
        return Entry(id=self.id, date=self.date, type=EntryType(self.type), text=self.text)


class SqlEntryStore:
    """
    Relational entry storage.

    Implements EntryStore protocol. Every operation runs in its own
    session, committed on success and rolled back on any error, so a
    failed write never leaves a partial row behind.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str) -> SqlEntryStore:
        """Build a store from a SQLAlchemy database URL."""
        kwargs = {}
        if database_url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # All threads must see the same in-memory database
                kwargs["poolclass"] = StaticPool
        logger.debug(f"Initializing database engine: {database_url}")
        return cls(create_engine(database_url, **kwargs))

    def create_schema(self) -> None:
        """Create the entries table if it does not exist."""
        Base.metadata.create_all(self.engine)
        logger.info("Database schema ready")

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except WorklogError:
            session.rollback()
            raise
        except Exception as e:
            logger.error(f"Database session error, rolling back: {e}")
            session.rollback()
            raise
        finally:
            session.close()

    def create_entry(self, entry_date: date | str, entry_type: EntryType | str, text: str) -> Entry:
        """Validate and persist a new entry."""
        parsed_date, parsed_type, parsed_text = validate_entry_fields(entry_date, entry_type, text)
        with self._session() as session:
            row = EntryRow(date=parsed_date, type=parsed_type.value, text=parsed_text)
            session.add(row)
            session.flush()
            entry = row.to_entry()
        logger.info(f"Created entry {entry.id}")
        return entry

    def update_entry(
        self, entry_id: int, entry_date: date | str, entry_type: EntryType | str, text: str
    ) -> Entry:
        """Replace an entry's fields."""
        parsed_date, parsed_type, parsed_text = validate_entry_fields(entry_date, entry_type, text)
        with self._session() as session:
            row = session.get(EntryRow, entry_id)
            if row is None:
                raise NotFoundError(entry_id)
            row.date = parsed_date
            row.type = parsed_type.value
            row.text = parsed_text
            session.flush()
            entry = row.to_entry()
        logger.info(f"Updated entry {entry_id}")
        return entry

    def delete_entry(self, entry_id: int) -> None:
        """Delete an entry."""
        with self._session() as session:
            row = session.get(EntryRow, entry_id)
            if row is None:
                raise NotFoundError(entry_id)
            session.delete(row)
        logger.info(f"Deleted entry {entry_id}")

    def get_entry(self, entry_id: int) -> Entry:
        """Fetch one entry."""
        with self._session() as session:
            row = session.get(EntryRow, entry_id)
            if row is None:
                raise NotFoundError(entry_id)
            return row.to_entry()

    def list_entries(self) -> list[Entry]:
        """Fetch all entries."""
        with self._session() as session:
            rows = session.scalars(select(EntryRow)).all()
            entries = [row.to_entry() for row in rows]
        logger.debug(f"Loaded {len(entries)} entries")
        return entries
