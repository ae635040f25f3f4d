# -*- coding: utf-8 -*-
"""
Service layer cho Employee / JobHistory.
"""
from __future__ import annotations

from hr.filters import NamedFilter
from hr.models import Employee, JobHistory
from .base import EntityService


class EmployeeService(EntityService[Employee]):
    entity_name = "Employee"
    named_filters = (NamedFilter.JOB_HISTORY_IS_NULL,)


class JobHistoryService(EntityService[JobHistory]):
    entity_name = "JobHistory"
