"""
db/base.py
- Purpose: Provide Base with every model registered.
- The console owns these tables and their migrations; create_all here is for
  local dev and tests only.
"""

from docstatus.models.base import Base
import docstatus.models  # noqa: F401  (ensures models are imported)

__all__ = ["Base", "create_all"]


def create_all(engine) -> None:
    Base.metadata.create_all(bind=engine)
