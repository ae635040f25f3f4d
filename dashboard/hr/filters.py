# -*- coding: utf-8 -*-
"""
Named list filters.

The ``filter`` query parameter of a list endpoint only accepts one of the
values below. Each value is bound to a fixed ORM predicate selecting the
records whose inverse one-to-one reference is absent.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional

from django.db.models import Q


class NamedFilter(str, Enum):
    COUNTRY_IS_NULL = "country-is-null"
    LOCATION_IS_NULL = "location-is-null"
    DEPARTMENT_IS_NULL = "department-is-null"
    JOB_HISTORY_IS_NULL = "jobhistory-is-null"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["NamedFilter"]:
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def predicate(self) -> Q:
        return _PREDICATES[self]


_PREDICATES = {
    NamedFilter.COUNTRY_IS_NULL: Q(country__isnull=True),
    NamedFilter.LOCATION_IS_NULL: Q(location__isnull=True),
    NamedFilter.DEPARTMENT_IS_NULL: Q(department__isnull=True),
    NamedFilter.JOB_HISTORY_IS_NULL: Q(job_history__isnull=True),
}
