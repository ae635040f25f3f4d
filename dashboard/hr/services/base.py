# -*- coding: utf-8 -*-
"""
Service layer shared by every HR entity.

- create / full update / partial update (merge) / list / paged list /
  named-filter list / get one / delete.
- The only conditional rule lives in ``partial_update``: a field is copied
  onto the stored record only when the incoming value is not None.
- Repo chỉ thuần DB; identity checks against the URL are done by the views.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from django.db import models, transaction

from hr.exceptions import EntityNotFoundError
from hr.filters import NamedFilter
from hr.pageable import Page, Pageable
from hr.repositories.base import EntityRepository

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=models.Model)


class EntityService(Generic[M]):
    entity_name: str = "Entity"
    named_filters: Tuple[NamedFilter, ...] = ()

    def __init__(self, repository: EntityRepository[M]):
        self.repository = repository

    # ============== Mutations ==============
    def save(self, data: Dict[str, Any]) -> M:
        logger.debug("Request to save %s : %s", self.entity_name, data)
        fields = {k: v for k, v in data.items() if k != "id"}
        obj, relations = self.repository.build(fields)
        return self.repository.save(obj, relations)

    def update(self, data: Dict[str, Any]) -> M:
        """Replace the whole record; fields missing from ``data`` are cleared.

        Raises EntityNotFoundError when the row is gone at write time.
        """
        logger.debug("Request to update %s : %s", self.entity_name, data)
        entity_id = data.get("id")
        with transaction.atomic():
            if self.repository.find_by_id_for_update(entity_id) is None:
                raise EntityNotFoundError(self.entity_name, entity_id)
            obj, relations = self.repository.build(data)
            return self.repository.save(obj, relations, force_update=True)

    def partial_update(self, data: Dict[str, Any]) -> M:
        logger.debug("Request to partially update %s : %s", self.entity_name, data)
        entity_id = data.get("id")
        with transaction.atomic():
            existing = self.repository.find_by_id_for_update(entity_id)
            if existing is None:
                raise EntityNotFoundError(self.entity_name, entity_id)
            for name in self.repository.scalar_fields():
                value = data.get(name)
                if value is not None:
                    setattr(existing, name, value)
            return self.repository.save(existing)

    def delete(self, entity_id: int) -> None:
        logger.debug("Request to delete %s : %s", self.entity_name, entity_id)
        self.repository.delete_by_id(entity_id)

    # ============== Queries ==============
    def find_all(self) -> List[M]:
        logger.debug("Request to get all %s", self.entity_name)
        return list(self.repository.find_all())

    def find_page(self, pageable: Pageable) -> Page[M]:
        logger.debug("Request to get a page of %s : %s", self.entity_name, pageable)
        return self.repository.find_page(pageable)

    def supports(self, named_filter: Optional[NamedFilter]) -> bool:
        return named_filter is not None and named_filter in self.named_filters

    def find_all_where(self, named_filter: NamedFilter) -> List[M]:
        if not self.supports(named_filter):
            raise ValueError(f"{self.entity_name} does not support filter {named_filter.value!r}")
        logger.debug("Request to get all %s where %s", self.entity_name, named_filter.value)
        return list(self.repository.find_all_where(named_filter.predicate))

    def find_one(self, entity_id: int) -> Optional[M]:
        logger.debug("Request to get %s : %s", self.entity_name, entity_id)
        return self.repository.find_by_id(entity_id)

    def exists(self, entity_id: int) -> bool:
        return self.repository.exists_by_id(entity_id)
