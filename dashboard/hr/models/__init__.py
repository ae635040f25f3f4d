# Load tất cả model vào namespace hr.models
from .location import Region, Country, Location
from .core import Department, Task, Job
from .employee import Language, Employee, JobHistory

__all__ = [
    "Region", "Country", "Location",
    "Department", "Task", "Job",
    "Language", "Employee", "JobHistory",
]
