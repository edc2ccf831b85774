"""
Pastoral Admin Backend — Keyed Lookup Service
===============================================

What:  Guarded CRUD for the id + unique key lookup tables. Industry and
       FieldOfWork services are this class with their own model, errors
       and response schema.

Key Guard:
    create:  key already present            → AlreadyExists, no insert
    update:  key unchanged                  → no lookup, write proceeds
             key held by another id         → AlreadyExists, no write
    either:  unique violation on the write  → AlreadyExists
             (another request inserted the key after the guard ran)
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from pastoral_admin.exceptions import AlreadyExistsError, NotFoundError
from pastoral_admin.repositories.lookup import KeyedLookupRepository
from pastoral_admin.services.base import BaseService

LookupT = TypeVar("LookupT")
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class KeyedLookupService(BaseService, Generic[LookupT, ResponseT]):
    model: Type[LookupT]
    response: Type[ResponseT]
    not_found: Type[NotFoundError]
    already_exists: Type[AlreadyExistsError]
    label: str

    def __init__(
        self,
        repository: KeyedLookupRepository[LookupT],
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(logger)
        self.repository = repository

    async def create(self, key: str) -> ResponseT:
        """
        Raises:
            AlreadyExistsError subclass: the key is taken (→ 409)
            InternalError: lookup or insert failed (→ 500)
        """
        await self._ensure_key_free(key)
        try:
            entity = await self.repository.create(self.model(key=key))
        except IntegrityError as e:
            raise self.already_exists(key) from e
        except Exception as e:
            raise self._internal(f"create {self.label}", e, key=key) from e

        self.logger.info("%s created: %s (%s)", self.label.capitalize(), entity.id, entity.key)
        return self.response.model_validate(entity)

    async def update(self, entity_id: int, key: str) -> None:
        entity = await self._get(entity_id)

        if key != entity.key:
            await self._ensure_key_free(key, entity_id=entity_id)

        entity.key = key
        try:
            await self.repository.update(entity)
        except IntegrityError as e:
            raise self.already_exists(key) from e
        except Exception as e:
            raise self._internal(f"update {self.label}", e, id=entity_id) from e

    async def delete(self, entity_id: int) -> None:
        await self._get(entity_id)
        try:
            await self.repository.delete(entity_id)
        except Exception as e:
            raise self._internal(f"delete {self.label}", e, id=entity_id) from e

    async def get_by_id(self, entity_id: int) -> ResponseT:
        return self.response.model_validate(await self._get(entity_id))

    async def get_all(self) -> List[ResponseT]:
        """Every row ordered by key; an empty table gives an empty list."""
        try:
            entities = await self.repository.get_all()
        except self.not_found:
            return []
        except Exception as e:
            raise self._internal(f"list {self.label}", e) from e
        return [self.response.model_validate(entity) for entity in entities]

    async def _get(self, entity_id: int) -> LookupT:
        try:
            return await self.repository.get_by_id(entity_id)
        except self.not_found:
            raise
        except Exception as e:
            raise self._internal(f"get {self.label}", e, id=entity_id) from e

    async def _ensure_key_free(self, key: str, entity_id: Optional[int] = None) -> None:
        try:
            existing = await self.repository.get_by_key(key)
        except self.not_found:
            return
        except Exception as e:
            raise self._internal(f"look up {self.label} by key", e, key=key) from e

        if entity_id is None or existing.id != entity_id:
            raise self.already_exists(key)
