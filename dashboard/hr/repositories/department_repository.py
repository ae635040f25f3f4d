# -*- coding: utf-8 -*-
"""
Repository layer cho Department (thuần DB).
"""
from __future__ import annotations

from hr.models import Department
from .base import EntityRepository


class DepartmentRepository(EntityRepository[Department]):
    model = Department
    select_related = ("location",)
