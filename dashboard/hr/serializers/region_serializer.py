from hr.models import Country, Location, Region
from .base import EntitySerializer, one_to_one


class RegionSerializer(EntitySerializer):
    class Meta:
        model = Region
        fields = ["id", "region_name"]


class CountrySerializer(EntitySerializer):
    region = one_to_one(Country, Region)

    class Meta:
        model = Country
        fields = ["id", "country_name", "region"]


class LocationSerializer(EntitySerializer):
    country = one_to_one(Location, Country)

    class Meta:
        model = Location
        fields = ["id", "street_address", "postal_code", "city", "state_province", "country"]
