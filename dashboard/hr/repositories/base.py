# -*- coding: utf-8 -*-
"""
Repository layer (thuần DB): generic lookup/persist over one model.

Repositories hold no business rules. Each entity gets a subclass that names
its model and the relations to load eagerly.
"""
from __future__ import annotations
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from django.db import models, transaction
from django.db.models import Q, QuerySet

from hr.pageable import Page, Pageable

M = TypeVar("M", bound=models.Model)


class EntityRepository(Generic[M]):
    model: Type[M]
    select_related: Tuple[str, ...] = ()
    prefetch_related: Tuple[str, ...] = ()

    # ============== Metadata ==============
    def scalar_fields(self) -> List[str]:
        return [
            f.name for f in self.model._meta.concrete_fields
            if not f.is_relation and not f.primary_key
        ]

    def many_to_many_fields(self) -> List[str]:
        return [f.name for f in self.model._meta.many_to_many]

    def queryset(self) -> QuerySet[M]:
        qs = self.model.objects.all()
        if self.select_related:
            qs = qs.select_related(*self.select_related)
        if self.prefetch_related:
            qs = qs.prefetch_related(*self.prefetch_related)
        return qs

    # ============== Queries ==============
    def find_by_id(self, pk: int) -> Optional[M]:
        return self.queryset().filter(pk=pk).first()

    def find_by_id_for_update(self, pk: int) -> Optional[M]:
        # Must run inside transaction.atomic
        return self.model.objects.select_for_update().filter(pk=pk).first()

    def exists_by_id(self, pk: int) -> bool:
        return self.model.objects.filter(pk=pk).exists()

    def find_all(self) -> QuerySet[M]:
        return self.queryset().order_by("id")

    def find_all_where(self, predicate: Q) -> QuerySet[M]:
        return self.queryset().filter(predicate).order_by("id")

    def find_page(self, pageable: Pageable) -> Page[M]:
        qs = self.queryset().order_by(*pageable.ordering())
        total = qs.count()
        content = list(qs[pageable.offset:pageable.offset + pageable.size])
        return Page(content=content, total=total, pageable=pageable)

    # ============== Mutations ==============
    def build(self, data: Dict[str, Any]) -> Tuple[M, Dict[str, Iterable]]:
        """Split validated data into an unsaved instance and its many-to-many values."""
        m2m_names = set(self.many_to_many_fields())
        fields = {k: v for k, v in data.items() if k not in m2m_names}
        relations = {name: data.get(name) or [] for name in m2m_names}
        return self.model(**fields), relations

    @transaction.atomic
    def save(self, obj: M, relations: Optional[Dict[str, Iterable]] = None, *, force_update: bool = False) -> M:
        obj.save(force_update=force_update)
        for name, values in (relations or {}).items():
            getattr(obj, name).set(values)
        return obj

    @transaction.atomic
    def delete_by_id(self, pk: int) -> None:
        self.model.objects.filter(pk=pk).delete()
