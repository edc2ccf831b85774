"""Industry lookup service (/api/admin/industry)."""

from pastoral_admin.exceptions import IndustryAlreadyExistsError, IndustryNotFoundError
from pastoral_admin.models.industry import Industry
from pastoral_admin.schemas.industry import IndustryResponse
from pastoral_admin.services.lookup_service import KeyedLookupService


class IndustryService(KeyedLookupService[Industry, IndustryResponse]):
    model = Industry
    response = IndustryResponse
    not_found = IndustryNotFoundError
    already_exists = IndustryAlreadyExistsError
    label = "industry"
