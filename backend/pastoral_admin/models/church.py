"""
Pastoral Admin Backend — Church SQLAlchemy Model
==================================================

What:  ORM model representing the `church` table.
Who:   Written by ChurchRepository; listed and counted with ChurchFilters.

Table Design:
    - UUID primary key, generated on insert
    - name is unique (uq_church_name); the service also checks it before
      every create and rename
    - address_id references address.id with ON DELETE RESTRICT: an address
      cannot be deleted while a church points at it, and deleting a church
      leaves its address in place
    - is_active is a plain flag toggled through update (hard delete also exists)

Indexes:
    uq_church_name doubles as the index behind ORDER BY name in listings;
    idx_church_diocese serves the most common list filter.
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Index, String, UniqueConstraint, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from pastoral_admin.database import Base


class Church(Base):
    """
    A parish or cathedral registered by an administrator.

    Lifecycle:
        1. Created together with its address in one transaction (is_active=True)
        2. Updated in place (full replace of the mutable fields)
        3. Deleted outright; the address row survives
    """

    __tablename__ = "church"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    diocese: Mapped[str] = mapped_column(String(255), nullable=False)

    parish_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, default=None)
    website_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)
    phone_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, default=None)

    address_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("address.id", name="fk_address", ondelete="RESTRICT"),
        nullable=False,
    )

    is_archdiocese: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_church_name"),
        Index("idx_church_diocese", "diocese"),
    )

    def __repr__(self) -> str:
        return f"<Church(id={self.id}, name='{self.name}', is_active={self.is_active})>"
