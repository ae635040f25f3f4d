"""
Service layer: one service per HR entity, all built on EntityService.
"""
from .base import EntityService
from .region_service import RegionService, CountryService, LocationService
from .department_service import DepartmentService
from .job_service import TaskService, JobService
from .employee_service import EmployeeService, JobHistoryService

__all__ = [
    "EntityService",
    "RegionService", "CountryService", "LocationService",
    "DepartmentService",
    "TaskService", "JobService",
    "EmployeeService", "JobHistoryService",
]
