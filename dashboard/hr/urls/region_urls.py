from django.urls import path
from hr.views.region_view import (
    RegionListCreateView, RegionDetailView,
    CountryListCreateView, CountryDetailView,
    LocationListCreateView, LocationDetailView,
)


def build_urlpatterns(container):
    return [
        # /api/regions
        path("regions", RegionListCreateView.as_view(service=container.region_service), name="region-list-create"),
        path("regions/<int:pk>", RegionDetailView.as_view(service=container.region_service), name="region-detail"),
        # /api/countries
        path("countries", CountryListCreateView.as_view(service=container.country_service), name="country-list-create"),
        path("countries/<int:pk>", CountryDetailView.as_view(service=container.country_service), name="country-detail"),
        # /api/locations
        path("locations", LocationListCreateView.as_view(service=container.location_service), name="location-list-create"),
        path("locations/<int:pk>", LocationDetailView.as_view(service=container.location_service), name="location-detail"),
    ]
