from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    # Columns are naive UTC (timezone=False).
    return datetime.now(timezone.utc).replace(tzinfo=None)
