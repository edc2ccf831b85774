# Services package init
"""
Pastoral Admin Backend — Services Layer
=========================================

What:  Business rules sitting between routes (HTTP) and repositories (SQL).
How:   Services receive their repositories and a logger in the constructor
       (see dependencies.build_services) and are reached from routes through
       FastAPI's dependency injection.

Service Inventory:
    - ChurchService:       name guard, transactional church + address create,
                           update/delete/get, filtered list with count
    - AddressService:      standalone address CRUD
    - IndustryService:     industry lookup CRUD (KeyedLookupService)
    - FieldOfWorkService:  field-of-work lookup CRUD (KeyedLookupService)

Every service lets NotFound/AlreadyExists errors through and converts any
other failure into InternalError after logging it.
"""

from pastoral_admin.services.address_service import AddressService
from pastoral_admin.services.church_service import ChurchService
from pastoral_admin.services.field_of_work_service import FieldOfWorkService
from pastoral_admin.services.industry_service import IndustryService

__all__ = [
    "AddressService",
    "ChurchService",
    "FieldOfWorkService",
    "IndustryService",
]
