"""
Pastoral Admin Backend — FieldOfWork SQLAlchemy Model
=======================================================

What:  ORM model representing the `fields_of_work` lookup table.
How:   Same shape as Industry: a small generated id and a unique translation
       key (e.g. "field_of_work.engineering").
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pastoral_admin.database import Base
from pastoral_admin.models.industry import SmallId


class FieldOfWork(Base):
    """A professional field a job profile can belong to."""

    __tablename__ = "fields_of_work"

    id: Mapped[int] = mapped_column(SmallId, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<FieldOfWork(id={self.id}, key='{self.key}')>"
