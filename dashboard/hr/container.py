from __future__ import annotations

from dataclasses import dataclass

from .repositories import (
    CountryRepository,
    DepartmentRepository,
    EmployeeRepository,
    JobHistoryRepository,
    JobRepository,
    LocationRepository,
    RegionRepository,
    TaskRepository,
)
from .services import (
    CountryService,
    DepartmentService,
    EmployeeService,
    JobHistoryService,
    JobService,
    LocationService,
    RegionService,
    TaskService,
)


@dataclass(frozen=True)
class Container:
    regions_repo: RegionRepository
    countries_repo: CountryRepository
    locations_repo: LocationRepository
    departments_repo: DepartmentRepository
    tasks_repo: TaskRepository
    employees_repo: EmployeeRepository
    jobs_repo: JobRepository
    job_histories_repo: JobHistoryRepository

    region_service: RegionService
    country_service: CountryService
    location_service: LocationService
    department_service: DepartmentService
    task_service: TaskService
    employee_service: EmployeeService
    job_service: JobService
    job_history_service: JobHistoryService


def build_container() -> Container:
    regions_repo = RegionRepository()
    countries_repo = CountryRepository()
    locations_repo = LocationRepository()
    departments_repo = DepartmentRepository()
    tasks_repo = TaskRepository()
    employees_repo = EmployeeRepository()
    jobs_repo = JobRepository()
    job_histories_repo = JobHistoryRepository()

    return Container(
        regions_repo=regions_repo,
        countries_repo=countries_repo,
        locations_repo=locations_repo,
        departments_repo=departments_repo,
        tasks_repo=tasks_repo,
        employees_repo=employees_repo,
        jobs_repo=jobs_repo,
        job_histories_repo=job_histories_repo,
        region_service=RegionService(regions_repo),
        country_service=CountryService(countries_repo),
        location_service=LocationService(locations_repo),
        department_service=DepartmentService(departments_repo),
        task_service=TaskService(tasks_repo),
        employee_service=EmployeeService(employees_repo),
        job_service=JobService(jobs_repo),
        job_history_service=JobHistoryService(job_histories_repo),
    )
