from django.db import models


class Region(models.Model):
    region_name = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        db_table = "region"

    def __str__(self):
        return self.region_name or f"Region {self.pk}"


class Country(models.Model):
    country_name = models.CharField(max_length=255, null=True, blank=True)
    region = models.OneToOneField(
        Region, on_delete=models.SET_NULL, null=True, blank=True, related_name="country"
    )

    class Meta:
        db_table = "country"
        verbose_name_plural = "countries"

    def __str__(self):
        return self.country_name or f"Country {self.pk}"


class Location(models.Model):
    street_address = models.CharField(max_length=255, null=True, blank=True)
    postal_code = models.CharField(max_length=32, null=True, blank=True)
    city = models.CharField(max_length=255, null=True, blank=True)
    state_province = models.CharField(max_length=255, null=True, blank=True)
    country = models.OneToOneField(
        Country, on_delete=models.SET_NULL, null=True, blank=True, related_name="location"
    )

    class Meta:
        db_table = "location"

    def __str__(self):
        return ", ".join(p for p in (self.street_address, self.city) if p) or f"Location {self.pk}"
