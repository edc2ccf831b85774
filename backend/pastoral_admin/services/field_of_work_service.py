"""Field-of-work lookup service (/api/admin/field-of-work)."""

from pastoral_admin.exceptions import FieldOfWorkAlreadyExistsError, FieldOfWorkNotFoundError
from pastoral_admin.models.field_of_work import FieldOfWork
from pastoral_admin.schemas.field_of_work import FieldOfWorkResponse
from pastoral_admin.services.lookup_service import KeyedLookupService


class FieldOfWorkService(KeyedLookupService[FieldOfWork, FieldOfWorkResponse]):
    model = FieldOfWork
    response = FieldOfWorkResponse
    not_found = FieldOfWorkNotFoundError
    already_exists = FieldOfWorkAlreadyExistsError
    label = "field of work"
