"""
Pastoral Admin Backend — Repository Tests
===========================================

What:  Query behavior of the repositories on in-memory SQLite: name
       matching, filters, ordering, pagination, list/count agreement and
       the address foreign key.
"""

import uuid
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from conftest import address_payload
from pastoral_admin.exceptions import (
    AddressInUseError,
    ChurchNotFoundError,
    IndustryAlreadyExistsError,
    IndustryNotFoundError,
)
from pastoral_admin.models import Address, Church, Industry
from pastoral_admin.repositories import (
    AddressRepository,
    ChurchRepository,
    IndustryRepository,
)
from pastoral_admin.schemas.church import ChurchFilters
from pastoral_admin.services.address_service import AddressService
from pastoral_admin.services.industry_service import IndustryService

CHURCHES = [
    ("St. Mary's Cathedral", "Los Angeles", True, True),
    ("Holy Family", "Los Angeles", False, True),
    ("St. Joseph", "Orange", False, False),
    ("Our Lady of Sorrows", "Orange", False, True),
    ("100% Faith Chapel", "San Diego", False, True),
]


@pytest.fixture
def church_repo(session_factory):
    return ChurchRepository(session_factory)


@pytest.fixture
def address_repo(session_factory):
    return AddressRepository(session_factory)


@pytest_asyncio.fixture
async def seeded(church_repo, address_repo):
    address = await address_repo.create(Address(**address_payload()))
    for name, diocese, archdiocese, active in CHURCHES:
        await church_repo.create(
            Church(
                name=name,
                diocese=diocese,
                address_id=address.id,
                is_archdiocese=archdiocese,
                is_active=active,
            )
        )
    return address


class TestChurchRepository:

    @pytest.mark.asyncio
    async def test_get_by_name_is_case_insensitive_substring(self, church_repo, seeded):
        church = await church_repo.get_by_name("mary's")
        assert church.name == "St. Mary's Cathedral"

    @pytest.mark.asyncio
    async def test_get_by_name_escapes_wildcards(self, church_repo, seeded):
        assert (await church_repo.get_by_name("100%")).name == "100% Faith Chapel"
        with pytest.raises(ChurchNotFoundError):
            await church_repo.get_by_name("St_ Joseph")

    @pytest.mark.asyncio
    async def test_get_by_name_prefers_exact_match(self, church_repo, seeded):
        await church_repo.create(
            Church(name="St. Mary", diocese="Los Angeles", address_id=seeded.id)
        )

        assert (await church_repo.get_by_name("st. mary")).name == "St. Mary"

    @pytest.mark.asyncio
    async def test_get_by_name_excludes_given_id(self, church_repo, seeded):
        cathedral = await church_repo.get_by_name("St. Mary's Cathedral")
        exact = await church_repo.create(
            Church(name="St. Mary", diocese="Los Angeles", address_id=seeded.id)
        )

        found = await church_repo.get_by_name("St. Mary", exclude_id=cathedral.id)
        assert found.id == exact.id
        with pytest.raises(ChurchNotFoundError):
            await church_repo.get_by_name("St. Mary's", exclude_id=cathedral.id)

    @pytest.mark.asyncio
    async def test_get_by_name_does_not_match_shorter_existing_name(self, church_repo, seeded):
        """Only existing names containing the searched name are found."""
        with pytest.raises(ChurchNotFoundError):
            await church_repo.get_by_name("Holy Family Parish")

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, church_repo, seeded):
        with pytest.raises(ChurchNotFoundError):
            await church_repo.get_by_id(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_list_ordered_by_name(self, church_repo, seeded):
        churches = await church_repo.list(ChurchFilters())
        names = [c.name for c in churches]
        assert names == sorted(names)
        assert len(names) == len(CHURCHES)

    @pytest.mark.asyncio
    async def test_list_pagination(self, church_repo, seeded):
        page = await church_repo.list(ChurchFilters(limit=2, offset=1))
        everything = await church_repo.list(ChurchFilters())
        assert [c.id for c in page] == [c.id for c in everything[1:3]]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "filters",
        [
            ChurchFilters(),
            ChurchFilters(diocese="Orange"),
            ChurchFilters(is_active=True),
            ChurchFilters(is_archdiocese=False, is_active=True),
            ChurchFilters(name_contains="st."),
            ChurchFilters(diocese="Los Angeles", name_contains="family"),
            ChurchFilters(diocese="Nowhere"),
        ],
    )
    async def test_count_matches_unpaginated_list(self, church_repo, seeded, filters):
        listed = await church_repo.list(filters)
        assert await church_repo.count(filters) == len(listed)

    @pytest.mark.asyncio
    async def test_count_ignores_pagination(self, church_repo, seeded):
        filters = ChurchFilters(diocese="Los Angeles", limit=1, offset=0)
        assert len(await church_repo.list(filters)) == 1
        assert await church_repo.count(filters) == 2

    @pytest.mark.asyncio
    async def test_filter_by_address(self, church_repo, seeded):
        assert len(await church_repo.list(ChurchFilters(address_id=seeded.id))) == len(CHURCHES)
        assert await church_repo.list(ChurchFilters(address_id=uuid.uuid4())) == []

    @pytest.mark.asyncio
    async def test_unique_name_constraint(self, church_repo, seeded):
        with pytest.raises(IntegrityError):
            await church_repo.create(
                Church(name="Holy Family", diocese="Elsewhere", address_id=seeded.id)
            )

    @pytest.mark.asyncio
    async def test_update_and_delete(self, church_repo, seeded):
        church = await church_repo.get_by_name("Holy Family")
        church.is_active = False
        await church_repo.update(church)
        assert (await church_repo.get_by_id(church.id)).is_active is False

        await church_repo.delete(church.id)
        with pytest.raises(ChurchNotFoundError):
            await church_repo.get_by_id(church.id)


class TestAddressForeignKey:

    @pytest.mark.asyncio
    async def test_referenced_address_cannot_be_deleted(self, session_factory, address_repo, seeded):
        with pytest.raises(IntegrityError):
            await address_repo.delete(seeded.id)

        service = AddressService(address_repo)
        with pytest.raises(AddressInUseError):
            await service.delete(seeded.id)

    @pytest.mark.asyncio
    async def test_deleting_church_keeps_address(self, church_repo, address_repo, seeded):
        for church in await church_repo.list(ChurchFilters()):
            await church_repo.delete(church.id)

        assert (await address_repo.get_by_id(seeded.id)).city == "Los Angeles"
        await address_repo.delete(seeded.id)


class TestIndustryRepository:

    @pytest.fixture(autouse=True)
    def setup(self, session_factory):
        self.repo = IndustryRepository(session_factory)

    @pytest.mark.asyncio
    async def test_get_all_ordered_by_key(self):
        for key in ("industry.retail", "industry.energy", "industry.finance"):
            await self.repo.create(Industry(key=key))

        keys = [i.key for i in await self.repo.get_all()]
        assert keys == ["industry.energy", "industry.finance", "industry.retail"]

    @pytest.mark.asyncio
    async def test_get_all_empty(self):
        assert await self.repo.get_all() == []

    @pytest.mark.asyncio
    async def test_get_by_key(self):
        created = await self.repo.create(Industry(key="industry.energy"))
        assert created.id is not None
        assert (await self.repo.get_by_key("industry.energy")).id == created.id
        with pytest.raises(IndustryNotFoundError):
            await self.repo.get_by_key("industry.unknown")

    @pytest.mark.asyncio
    async def test_get_by_id_out_of_smallint_range_is_not_found(self):
        await self.repo.create(Industry(key="industry.energy"))
        for entity_id in (0, -1, 32768, 40000):
            with pytest.raises(IndustryNotFoundError):
                await self.repo.get_by_id(entity_id)

    @pytest.mark.asyncio
    async def test_out_of_range_id_never_reaches_database(self):
        repo = IndustryRepository(MagicMock(side_effect=AssertionError("session opened")))

        with pytest.raises(IndustryNotFoundError):
            await repo.get_by_id(40000)

    @pytest.mark.asyncio
    async def test_service_create_twice_conflicts(self):
        service = IndustryService(self.repo)
        await service.create("industry.energy")
        with pytest.raises(IndustryAlreadyExistsError):
            await service.create("industry.energy")
