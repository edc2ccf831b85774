"""
Pastoral Admin Backend — Service Wiring
=========================================

What:  Builds the repositories and services once per application and hands
       them to route handlers through FastAPI dependencies.
How:   create_app() calls build_services() with the session factory and
       stores the result on app.state.services. Each get_*_service reads it
       back from the request, so tests can swap any service with
       app.dependency_overrides.

Object Graph:
    session_factory ──▶ AddressRepository ──┬──▶ AddressService
                    │                       └──▶ ChurchService
                    ├─▶ ChurchRepository ───────▶ ChurchService
                    ├─▶ IndustryRepository ─────▶ IndustryService
                    └─▶ FieldOfWorkRepository ──▶ FieldOfWorkService
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pastoral_admin.repositories import (
    AddressRepository,
    ChurchRepository,
    FieldOfWorkRepository,
    IndustryRepository,
)
from pastoral_admin.services import (
    AddressService,
    ChurchService,
    FieldOfWorkService,
    IndustryService,
)


@dataclass
class Services:
    church: ChurchService
    address: AddressService
    industry: IndustryService
    field_of_work: FieldOfWorkService


def build_services(
    session_factory: async_sessionmaker[AsyncSession],
    logger: Optional[logging.Logger] = None,
) -> Services:
    """
    Construct every repository and service.

    Args:
        session_factory: Shared by all repositories (one connection pool)
        logger: Given to every service; None lets each log under its module
    """
    addresses = AddressRepository(session_factory)
    churches = ChurchRepository(session_factory)

    return Services(
        church=ChurchService(churches, addresses, logger=logger),
        address=AddressService(addresses, logger=logger),
        industry=IndustryService(IndustryRepository(session_factory), logger=logger),
        field_of_work=FieldOfWorkService(FieldOfWorkRepository(session_factory), logger=logger),
    )


# ── FastAPI Dependencies ──────────────────────────────────────────────────


def get_church_service(request: Request) -> ChurchService:
    return request.app.state.services.church


def get_address_service(request: Request) -> AddressService:
    return request.app.state.services.address


def get_industry_service(request: Request) -> IndustryService:
    return request.app.state.services.industry


def get_field_of_work_service(request: Request) -> FieldOfWorkService:
    return request.app.state.services.field_of_work
