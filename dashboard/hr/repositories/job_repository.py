# -*- coding: utf-8 -*-
"""
Repository layer cho Task / Job (thuần DB).
"""
from __future__ import annotations

from hr.models import Job, Task
from .base import EntityRepository


class TaskRepository(EntityRepository[Task]):
    model = Task


class JobRepository(EntityRepository[Job]):
    model = Job
    select_related = ("employee",)
    prefetch_related = ("tasks",)
