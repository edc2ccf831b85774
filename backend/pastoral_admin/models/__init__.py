"""
Pastoral Admin Backend — ORM Models
=====================================

Every model is imported here so that `Base.metadata` knows about all tables
(Alembic --autogenerate and the test suite's create_all() rely on it).
"""

from pastoral_admin.models.address import Address
from pastoral_admin.models.church import Church
from pastoral_admin.models.field_of_work import FieldOfWork
from pastoral_admin.models.industry import Industry

__all__ = ["Address", "Church", "FieldOfWork", "Industry"]
