"""
Pastoral Admin Backend — Address SQLAlchemy Model
===================================================

What:  ORM model representing the `address` table.
Who:   Written by AddressRepository; referenced by Church.address_id.
When:  Created standalone (POST /api/admin/address) or inside the church
       creation transaction.

Table Design:
    - UUID primary key, generated on insert
    - street_line_2 is the only optional column; NULL means "no second line"
      (the request schema turns "" into None before it reaches this model)
    - No back-reference to church: an address does not know who owns it
"""

import uuid
from typing import Optional

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pastoral_admin.database import Base


class Address(Base):
    """A postal address owned by whichever church references its id."""

    __tablename__ = "address"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    street_line_1: Mapped[str] = mapped_column(String(255), nullable=False)
    street_line_2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state_province: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Address(id={self.id}, city='{self.city}', country='{self.country}')>"
