"""Persistence adapter for the `industries` lookup table."""

from pastoral_admin.exceptions import IndustryNotFoundError
from pastoral_admin.models.industry import Industry
from pastoral_admin.repositories.lookup import KeyedLookupRepository


class IndustryRepository(KeyedLookupRepository[Industry]):
    model = Industry
    not_found = IndustryNotFoundError
