import json
from unittest.mock import patch

import pytest
from django.urls import reverse

from hr.exceptions import EntityNotFoundError
from hr.models import Country, Location
from hr.services import LocationService

ALERT = "X-dashboardApp-alert"
ERROR = "X-dashboardApp-error"
PARAMS = "X-dashboardApp-params"


def list_url():
    return reverse("location-list-create")


def detail_url(pk):
    return reverse("location-detail", kwargs={"pk": pk})


@pytest.mark.django_db
def test_create_location(api_client, master_data):
    spain = Country.objects.create(country_name="Spain")
    payload = {"street_address": "10 Downing St", "city": "London", "country": {"id": spain.id}}

    res = api_client.post(list_url(), payload, format="json")

    assert res.status_code == 201
    body = res.json()
    assert body["id"] is not None
    assert body["country"] == {"id": spain.id}
    assert res["Location"] == detail_url(body["id"])
    assert res[ALERT] == "dashboardApp.location.created"
    assert res[PARAMS] == str(body["id"])


@pytest.mark.django_db
def test_create_with_country_already_in_use(api_client, master_data):
    payload = {"city": "Lille", "country": {"id": master_data["country"].id}}

    res = api_client.post(list_url(), payload, format="json")

    assert res.status_code == 400
    assert "country" in res.json()
    assert Location.objects.count() == 2


@pytest.mark.django_db
def test_put_keeps_own_country(api_client, master_data):
    loc = master_data["loc"]
    payload = {"id": loc.id, "city": "Paris", "country": master_data["country"].id}

    res = api_client.put(detail_url(loc.id), payload, format="json")

    assert res.status_code == 200
    assert res.json()["country"] == {"id": master_data["country"].id}


@pytest.mark.django_db
def test_put_with_country_of_another_location(api_client, master_data):
    free_loc = master_data["free_loc"]
    payload = {"id": free_loc.id, "city": "Madrid", "country": master_data["country"].id}

    res = api_client.put(detail_url(free_loc.id), payload, format="json")

    assert res.status_code == 400
    assert "country" in res.json()
    free_loc.refresh_from_db()
    assert free_loc.country_id is None


@pytest.mark.django_db
def test_put_on_row_deleted_before_write(api_client, master_data):
    loc = master_data["loc"]
    gone = EntityNotFoundError("Location", loc.id)

    with patch.object(LocationService, "update", side_effect=gone):
        res = api_client.put(detail_url(loc.id), {"id": loc.id, "city": "Lyon"}, format="json")

    assert res.status_code == 400
    assert res.json()["errorKey"] == "idnotfound"


@pytest.mark.django_db
def test_create_with_id_is_rejected(api_client):
    res = api_client.post(list_url(), {"id": 7, "city": "Rome"}, format="json")

    assert res.status_code == 400
    assert res.json()["errorKey"] == "idexists"
    assert res[ERROR] == "error.idexists"
    assert res[PARAMS] == "location"
    assert Location.objects.count() == 0


@pytest.mark.django_db
def test_get_location(api_client, master_data):
    loc = master_data["loc"]
    res = api_client.get(detail_url(loc.id))
    assert res.status_code == 200
    assert res.json()["city"] == "Paris"


@pytest.mark.django_db
def test_get_unknown_location_returns_404(api_client):
    assert api_client.get(detail_url(999)).status_code == 404


@pytest.mark.django_db
def test_put_replaces_location(api_client, master_data):
    loc = master_data["loc"]

    res = api_client.put(detail_url(loc.id), {"id": loc.id, "city": "Lyon"}, format="json")

    assert res.status_code == 200
    assert res[ALERT] == "dashboardApp.location.updated"
    loc.refresh_from_db()
    assert loc.city == "Lyon"
    assert loc.street_address is None


@pytest.mark.django_db
def test_put_without_id(api_client, master_data):
    loc = master_data["loc"]
    res = api_client.put(detail_url(loc.id), {"city": "Lyon"}, format="json")
    assert res.status_code == 400
    assert res.json()["errorKey"] == "idnull"


@pytest.mark.django_db
def test_put_with_mismatched_id_changes_nothing(api_client, master_data):
    loc = master_data["loc"]

    res = api_client.put(detail_url(loc.id), {"id": loc.id + 100, "city": "Lyon"}, format="json")

    assert res.status_code == 400
    assert res.json()["errorKey"] == "idinvalid"
    loc.refresh_from_db()
    assert loc.city == "Paris"


@pytest.mark.django_db
def test_put_unknown_id(api_client):
    res = api_client.put(detail_url(555), {"id": 555, "city": "Lyon"}, format="json")
    assert res.status_code == 400
    assert res.json()["errorKey"] == "idnotfound"
    assert not Location.objects.filter(id=555).exists()


@pytest.mark.django_db
def test_patch_merges_fields(api_client, master_data):
    loc = master_data["loc"]

    res = api_client.patch(
        detail_url(loc.id),
        data=json.dumps({"id": loc.id, "city": "Marseille", "postal_code": None}),
        content_type="application/merge-patch+json",
    )

    assert res.status_code == 200
    body = res.json()
    assert body["city"] == "Marseille"
    assert body["postal_code"] == "75001"
    assert body["country"] == {"id": master_data["country"].id}


@pytest.mark.django_db
def test_patch_with_mismatched_id(api_client, master_data):
    loc = master_data["loc"]
    res = api_client.patch(detail_url(loc.id), {"id": loc.id + 1, "city": "Nice"}, format="json")
    assert res.status_code == 400
    assert res.json()["errorKey"] == "idinvalid"


@pytest.mark.django_db
def test_patch_unknown_id_returns_404(api_client):
    res = api_client.patch(detail_url(42), {"id": 42, "city": "Nice"}, format="json")
    assert res.status_code == 404
    assert not Location.objects.filter(id=42).exists()


@pytest.mark.django_db
def test_list_with_named_filter(api_client, master_data):
    res = api_client.get(list_url(), {"filter": "department-is-null"})
    assert res.status_code == 200
    assert [item["id"] for item in res.json()] == [master_data["free_loc"].id]


@pytest.mark.django_db
def test_list_with_unknown_filter_returns_everything(api_client, master_data):
    res = api_client.get(list_url(), {"filter": "country-is-null"})
    assert res.status_code == 200
    assert [item["id"] for item in res.json()] == [master_data["loc"].id, master_data["free_loc"].id]


@pytest.mark.django_db
def test_delete_location(api_client, master_data):
    loc = master_data["free_loc"]

    res = api_client.delete(detail_url(loc.id))

    assert res.status_code == 204
    assert res[ALERT] == "dashboardApp.location.deleted"
    assert not Location.objects.filter(id=loc.id).exists()


@pytest.mark.django_db
def test_delete_unknown_id_is_no_content(api_client):
    assert api_client.delete(detail_url(999)).status_code == 204


@pytest.mark.django_db
def test_patch_with_country_of_another_location(api_client, master_data):
    free_loc = master_data["free_loc"]

    res = api_client.patch(
        detail_url(free_loc.id), {"id": free_loc.id, "country": master_data["country"].id}, format="json"
    )

    assert res.status_code == 400
    assert "country" in res.json()
