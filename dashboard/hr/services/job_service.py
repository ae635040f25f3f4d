# -*- coding: utf-8 -*-
"""
Service layer cho Task / Job.

Partial update of a Job only merges its scalar fields; the task set and the
employee reference are changed through a full update.
"""
from __future__ import annotations

from hr.filters import NamedFilter
from hr.models import Job, Task
from .base import EntityService


class TaskService(EntityService[Task]):
    entity_name = "Task"


class JobService(EntityService[Job]):
    entity_name = "Job"
    named_filters = (NamedFilter.JOB_HISTORY_IS_NULL,)
