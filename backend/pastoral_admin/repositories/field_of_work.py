"""Persistence adapter for the `fields_of_work` lookup table."""

from pastoral_admin.exceptions import FieldOfWorkNotFoundError
from pastoral_admin.models.field_of_work import FieldOfWork
from pastoral_admin.repositories.lookup import KeyedLookupRepository


class FieldOfWorkRepository(KeyedLookupRepository[FieldOfWork]):
    model = FieldOfWork
    not_found = FieldOfWorkNotFoundError
