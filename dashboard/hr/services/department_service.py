# -*- coding: utf-8 -*-
"""
Service layer cho Department.
"""
from __future__ import annotations

from hr.filters import NamedFilter
from hr.models import Department
from .base import EntityService


class DepartmentService(EntityService[Department]):
    entity_name = "Department"
    named_filters = (NamedFilter.JOB_HISTORY_IS_NULL,)
