import pytest

from hr.exceptions import EntityNotFoundError
from hr.filters import NamedFilter
from hr.models import Department, Job, Location, Region
from hr.pageable import Pageable, SortOrder


@pytest.mark.django_db
def test_save_assigns_identifier(container):
    region = container.region_service.save({"region_name": "Asia"})
    assert region.id is not None
    assert Region.objects.get(id=region.id).region_name == "Asia"


@pytest.mark.django_db
def test_save_ignores_client_identifier(container):
    existing = Region.objects.create(region_name="Europe")

    created = container.region_service.save({"id": existing.id, "region_name": "Asia"})

    assert created.id != existing.id
    existing.refresh_from_db()
    assert existing.region_name == "Europe"


@pytest.mark.django_db
def test_update_replaces_whole_record(container, master_data):
    loc = master_data["loc"]

    container.location_service.update({"id": loc.id, "city": "Lyon"})

    loc.refresh_from_db()
    assert loc.city == "Lyon"
    assert loc.street_address is None
    assert loc.country_id is None


@pytest.mark.django_db
def test_update_replaces_many_to_many(container, master_data):
    job = master_data["job"]

    container.job_service.update({"id": job.id, "job_title": "Lead", "tasks": []})

    job.refresh_from_db()
    assert job.job_title == "Lead"
    assert job.tasks.count() == 0


@pytest.mark.django_db
def test_save_with_many_to_many(container, master_data):
    task = master_data["task"]
    job = container.job_service.save({"job_title": "Analyst", "tasks": [task]})
    assert list(Job.objects.get(id=job.id).tasks.all()) == [task]


@pytest.mark.django_db
def test_delete_unknown_id_is_a_no_op(container):
    container.department_service.delete(99)
    assert Department.objects.count() == 0


@pytest.mark.django_db
def test_delete_existing(container, master_data):
    dept = master_data["dept"]
    container.department_service.delete(dept.id)
    assert not Department.objects.filter(id=dept.id).exists()


@pytest.mark.django_db
def test_find_one_missing_returns_none(container):
    assert container.region_service.find_one(123) is None


@pytest.mark.django_db
def test_named_filter_department_is_null(container, master_data):
    result = container.location_service.find_all_where(NamedFilter.DEPARTMENT_IS_NULL)
    assert [loc.id for loc in result] == [master_data["free_loc"].id]


@pytest.mark.django_db
def test_named_filter_job_history_is_null(container, master_data):
    spare = Department.objects.create(department_name="Support")
    result = container.department_service.find_all_where(NamedFilter.JOB_HISTORY_IS_NULL)
    assert [d.id for d in result] == [spare.id]


@pytest.mark.django_db
def test_named_filter_not_declared_by_entity(container):
    assert not container.region_service.supports(NamedFilter.DEPARTMENT_IS_NULL)
    with pytest.raises(ValueError):
        container.region_service.find_all_where(NamedFilter.DEPARTMENT_IS_NULL)


@pytest.mark.django_db
def test_pages_concatenate_to_full_list(container, employees_with_shared_names):
    sort = (SortOrder("last_name"),)
    full = container.employee_service.find_page(Pageable(page=0, size=100, sort=sort)).content

    collected = []
    page_no = 0
    while True:
        page = container.employee_service.find_page(Pageable(page=page_no, size=3, sort=sort))
        collected.extend(page.content)
        if not page.has_next:
            break
        page_no += 1

    assert [e.id for e in collected] == [e.id for e in full]
    assert len({e.id for e in collected}) == len(employees_with_shared_names)
    assert page.total == len(employees_with_shared_names)


@pytest.mark.django_db
def test_find_all_is_ordered_by_id(container):
    ids = [Location.objects.create(city=c).id for c in ("B", "A", "C")]
    assert [loc.id for loc in container.location_service.find_all()] == sorted(ids)


@pytest.mark.django_db
def test_update_of_missing_row_raises_not_found(container):
    with pytest.raises(EntityNotFoundError):
        container.location_service.update({"id": 404, "city": "Oslo"})
    assert not Location.objects.filter(id=404).exists()


@pytest.mark.django_db
def test_exists(container, master_data):
    assert container.region_service.exists(master_data["region"].id)
    assert not container.region_service.exists(9999)
