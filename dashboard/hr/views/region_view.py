# views/region_view.py
from hr.filters import NamedFilter
from hr.serializers.region_serializer import CountrySerializer, LocationSerializer, RegionSerializer

from .base import EntityDetailView, EntityListCreateView
from .utils import entity_detail_schema, entity_list_schema

# -----------------------------
# /api/regions
# -----------------------------
@entity_list_schema("Region", RegionSerializer, filters=(NamedFilter.COUNTRY_IS_NULL.value,))
class RegionListCreateView(EntityListCreateView):
    serializer_class = RegionSerializer
    entity_name = "region"
    url_name = "region"


@entity_detail_schema("Region", RegionSerializer)
class RegionDetailView(EntityDetailView):
    serializer_class = RegionSerializer
    entity_name = "region"
    url_name = "region"


# -----------------------------
# /api/countries
# -----------------------------
@entity_list_schema("Country", CountrySerializer, filters=(NamedFilter.LOCATION_IS_NULL.value,))
class CountryListCreateView(EntityListCreateView):
    serializer_class = CountrySerializer
    entity_name = "country"
    url_name = "country"


@entity_detail_schema("Country", CountrySerializer)
class CountryDetailView(EntityDetailView):
    serializer_class = CountrySerializer
    entity_name = "country"
    url_name = "country"


# -----------------------------
# /api/locations
# -----------------------------
@entity_list_schema("Location", LocationSerializer, filters=(NamedFilter.DEPARTMENT_IS_NULL.value,))
class LocationListCreateView(EntityListCreateView):
    serializer_class = LocationSerializer
    entity_name = "location"
    url_name = "location"


@entity_detail_schema("Location", LocationSerializer)
class LocationDetailView(EntityDetailView):
    serializer_class = LocationSerializer
    entity_name = "location"
    url_name = "location"
