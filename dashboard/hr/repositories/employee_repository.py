# -*- coding: utf-8 -*-
"""
Repository layer cho Employee / JobHistory (thuần DB).
"""
from __future__ import annotations

from hr.models import Employee, JobHistory
from .base import EntityRepository


class EmployeeRepository(EntityRepository[Employee]):
    model = Employee
    select_related = ("manager", "department")


class JobHistoryRepository(EntityRepository[JobHistory]):
    model = JobHistory
    select_related = ("job", "department", "employee")
