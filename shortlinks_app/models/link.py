from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Boolean, UniqueConstraint
from sqlalchemy.sql import func
from shortlinks_app.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(Base):
    """
    A shortened link.
    
    Uniqueness of both the destination URL and the short code is enforced
    by named constraints, so a race between two concurrent creations is
    settled by the database. The store reads the constraint name out of the
    IntegrityError to tell which field collided.
    
    Rows are never updated except for click_count, and never deleted.
    """
    __tablename__ = "links"
    __table_args__ = (
        UniqueConstraint("original_url", name="uq_links_original_url"),
        UniqueConstraint("short_code", name="uq_links_short_code"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    original_url = Column(String, nullable=False)
    short_code = Column(String(10), nullable=False)
    is_custom = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    click_count = Column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<Link id={self.id} short_code={self.short_code!r}>"
