"""
Pastoral Admin Backend — Industry SQLAlchemy Model
====================================================

What:  ORM model representing the `industries` lookup table.
How:   `key` holds a translation key (e.g. "industry.technology") that the
       frontend resolves to a localized label. It is unique.
"""

from sqlalchemy import Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from pastoral_admin.database import Base

# SMALLINT identity in PostgreSQL; SQLite only auto-increments INTEGER PRIMARY KEY
SmallId = SmallInteger().with_variant(Integer(), "sqlite")
SMALLINT_MAX = 32767


class Industry(Base):
    """A business industry an entrepreneur can be listed under."""

    __tablename__ = "industries"

    id: Mapped[int] = mapped_column(SmallId, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<Industry(id={self.id}, key='{self.key}')>"
