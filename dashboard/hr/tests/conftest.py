import pytest
from datetime import datetime, timezone as tz
from rest_framework.test import APIClient

from hr.container import build_container
from hr.models import Country, Department, Employee, Job, JobHistory, Language, Location, Region, Task

D1 = datetime(2024, 1, 15, 9, 0, tzinfo=tz.utc)
E1 = datetime(2024, 12, 31, 18, 0, tzinfo=tz.utc)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def master_data(db):
    region = Region.objects.create(region_name="Europe")
    country = Country.objects.create(country_name="France", region=region)
    loc = Location.objects.create(
        street_address="1 Rue de Rivoli", postal_code="75001", city="Paris",
        state_province="IDF", country=country,
    )
    free_loc = Location.objects.create(street_address="2 Calle Mayor", city="Madrid")
    dept = Department.objects.create(department_name="Sales", location=loc)
    emp = Employee.objects.create(
        first_name="Nguyen", last_name="Van A", email="a@example.com",
        hire_date=D1, salary=1000, commission_pct=5, department=dept,
    )
    task = Task.objects.create(title="Onboarding", description="First week")
    job = Job.objects.create(job_title="Engineer", min_salary=800, max_salary=2000, employee=emp)
    job.tasks.add(task)
    history = JobHistory.objects.create(
        start_date=D1, end_date=E1, language=Language.ENGLISH,
        job=job, department=dept, employee=emp,
    )
    return {
        "region": region, "country": country, "loc": loc, "free_loc": free_loc,
        "dept": dept, "emp": emp, "task": task, "job": job, "history": history,
    }


@pytest.fixture
def employees_with_shared_names(db):
    # 7 employees, several sharing the same last_name -> paging needs the id tie-break
    last_names = ["Tran", "Le", "Tran", "Nguyen", "Le", "Tran", "Nguyen"]
    return [
        Employee.objects.create(first_name=f"E{i}", last_name=name)
        for i, name in enumerate(last_names)
    ]
