"""
Link store backed by SQLAlchemy.

Every call opens its own short session from the injected session factory,
so one LinkStore is shared by all requests for the life of the process.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from shortlinks_app.models.link import Link
from .exceptions import DuplicateLinkError, StorageError

logger = logging.getLogger(__name__)

# Checked in this order; the constraint or column name shows up in the
# driver's message (SQLite names the column, PostgreSQL the constraint).
_UNIQUE_FIELDS = ("short_code", "original_url")


def _collided_field(error: IntegrityError) -> Optional[str]:
    # psycopg exposes the violated constraint directly
    diag = getattr(error.orig, "diag", None)
    message = getattr(diag, "constraint_name", None) or str(error.orig)
    for field in _UNIQUE_FIELDS:
        if field in message:
            return field
    return None


class LinkStore:
    """Durable table of links."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def find_by_url(self, url: str) -> Optional[Link]:
        """Return the link for this exact original URL, or None."""
        return self._find_one(Link.original_url == url)

    def find_by_code(self, code: str) -> Optional[Link]:
        """Return the link with this short code, or None."""
        return self._find_one(Link.short_code == code)

    def insert(self, url: str, code: str, is_custom: bool) -> Link:
        """
        Insert a new link and return it with id and created_at populated.
        
        Raises:
            DuplicateLinkError: url or code already stored
            StorageError: the database is unavailable
        """
        link = Link(original_url=url, short_code=code, is_custom=is_custom, click_count=0)
        session: Session = self.session_factory()
        try:
            session.add(link)
            session.commit()
            session.refresh(link)
            return link
        except IntegrityError as e:
            session.rollback()
            field = _collided_field(e)
            if field is None:
                logger.error("Unexpected integrity error inserting %s: %s", code, e)
                raise StorageError("Could not store link") from e
            raise DuplicateLinkError(field) from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Insert failed for %s: %s", code, e)
            raise StorageError("Could not store link") from e
        finally:
            session.close()

    def list_all(self) -> List[Link]:
        """All links, oldest first."""
        stmt = select(Link).order_by(Link.created_at.asc(), Link.id.asc())
        try:
            with self.session_factory() as session:
                return list(session.scalars(stmt).all())
        except SQLAlchemyError as e:
            logger.error("Listing links failed: %s", e)
            raise StorageError("Could not list links") from e

    def increment_clicks(self, link_id: int) -> None:
        """
        Add one to click_count in a single UPDATE.
        
        Raises:
            StorageError: no row with this id, or the database is unavailable
        """
        stmt = (
            update(Link)
            .where(Link.id == link_id)
            .values(click_count=Link.click_count + 1)
        )
        session: Session = self.session_factory()
        try:
            result = session.execute(stmt)
            if result.rowcount != 1:
                session.rollback()
                raise StorageError(f"No link with id {link_id}")
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError("Could not increment clicks") from e
        finally:
            session.close()

    def _find_one(self, condition) -> Optional[Link]:
        try:
            with self.session_factory() as session:
                return session.scalars(select(Link).where(condition).limit(1)).first()
        except SQLAlchemyError as e:
            logger.error("Lookup failed: %s", e)
            raise StorageError("Could not read links") from e
