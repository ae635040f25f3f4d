# -*- coding: utf-8 -*-
"""
Repository layer cho Region / Country / Location (thuần DB).
"""
from __future__ import annotations

from hr.models import Country, Location, Region
from .base import EntityRepository


class RegionRepository(EntityRepository[Region]):
    model = Region


class CountryRepository(EntityRepository[Country]):
    model = Country
    select_related = ("region",)


class LocationRepository(EntityRepository[Location]):
    model = Location
    select_related = ("country",)
