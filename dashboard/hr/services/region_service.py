# -*- coding: utf-8 -*-
"""
Service layer cho Region / Country / Location.
"""
from __future__ import annotations

from hr.filters import NamedFilter
from hr.models import Country, Location, Region
from .base import EntityService


class RegionService(EntityService[Region]):
    entity_name = "Region"
    named_filters = (NamedFilter.COUNTRY_IS_NULL,)


class CountryService(EntityService[Country]):
    entity_name = "Country"
    named_filters = (NamedFilter.LOCATION_IS_NULL,)


class LocationService(EntityService[Location]):
    entity_name = "Location"
    named_filters = (NamedFilter.DEPARTMENT_IS_NULL,)
