"""Key-value data access backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from skynote.core.errors import BackendUnavailable, BackendWriteFailure
from skynote.db.models import Preference
from skynote.db.session import Base, get_engine, get_session


class SQLKeyValueRepository:
    """Text values keyed by name, stored in the ``preferences`` table."""

    def open(self) -> None:
        try:
            engine = get_engine()
            Base.metadata.create_all(bind=engine)
        except (RuntimeError, SQLAlchemyError) as exc:
            raise BackendUnavailable(f"SQL backend unavailable: {exc}") from exc

    def get_string(self, key: str) -> Optional[str]:
        try:
            with get_session() as session:
                entity = session.get(Preference, key)
                return entity.value if entity else None
        except SQLAlchemyError as exc:
            raise BackendUnavailable(f"Cannot read '{key}': {exc}") from exc

    def set_string(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        try:
            with get_session() as session:
                entity = session.get(Preference, key)
                if not entity:
                    session.add(Preference(key=key, value=value, updated_at=now))
                else:
                    entity.value = value
                    entity.updated_at = now
                session.commit()
        except SQLAlchemyError as exc:
            raise BackendWriteFailure(f"Cannot write '{key}': {exc}") from exc
