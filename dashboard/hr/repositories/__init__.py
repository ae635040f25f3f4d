from .base import EntityRepository
from .region_repository import RegionRepository, CountryRepository, LocationRepository
from .department_repository import DepartmentRepository
from .job_repository import TaskRepository, JobRepository
from .employee_repository import EmployeeRepository, JobHistoryRepository

__all__ = [
    "EntityRepository",
    "RegionRepository", "CountryRepository", "LocationRepository",
    "DepartmentRepository",
    "TaskRepository", "JobRepository",
    "EmployeeRepository", "JobHistoryRepository",
]
