"""
Pastoral Admin Backend — Persistence Adapters
===============================================

What:  One repository per entity, translating domain operations into
       parameterized SQLAlchemy statements.
How:   Repositories hold only the session factory. Each call runs in its own
       short transaction unless the caller passes a session, in which case
       the statement joins the caller's transaction and is only flushed.
Who:   Constructed in dependencies.build_services(); used by the services.

Repository Inventory:
    - AddressRepository:      create, update, delete, get_by_id
    - ChurchRepository:       create, update, delete, get_by_id, get_by_name,
                              list, count
    - IndustryRepository:     create, update, delete, get_all, get_by_id, get_by_key
    - FieldOfWorkRepository:  same as IndustryRepository

"No rows" is reported as the entity's NotFoundError; every other failure is
the raw SQLAlchemy exception, which the services classify.
"""

from pastoral_admin.repositories.address import AddressRepository
from pastoral_admin.repositories.church import ChurchRepository
from pastoral_admin.repositories.field_of_work import FieldOfWorkRepository
from pastoral_admin.repositories.industry import IndustryRepository

__all__ = [
    "AddressRepository",
    "ChurchRepository",
    "FieldOfWorkRepository",
    "IndustryRepository",
]
