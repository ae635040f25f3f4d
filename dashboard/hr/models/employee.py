from django.db import models

from .core import Department, Job


class Language(models.TextChoices):
    FRENCH = "FRENCH", "French"
    ENGLISH = "ENGLISH", "English"
    SPANISH = "SPANISH", "Spanish"


class Employee(models.Model):
    first_name = models.CharField(max_length=255, null=True, blank=True)
    last_name = models.CharField(max_length=255, null=True, blank=True)
    email = models.CharField(max_length=254, null=True, blank=True)
    phone_number = models.CharField(max_length=32, null=True, blank=True)
    hire_date = models.DateTimeField(null=True, blank=True)
    salary = models.BigIntegerField(null=True, blank=True)
    commission_pct = models.BigIntegerField(null=True, blank=True)
    manager = models.ForeignKey(
        "self", on_delete=models.SET_NULL, null=True, blank=True, related_name="employees"
    )
    department = models.ForeignKey(
        Department, on_delete=models.SET_NULL, null=True, blank=True, related_name="employees"
    )

    class Meta:
        db_table = "employee"

    def __str__(self):
        full_name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return full_name or f"Employee {self.pk}"


class JobHistory(models.Model):
    start_date = models.DateTimeField(null=True, blank=True)
    end_date = models.DateTimeField(null=True, blank=True)
    language = models.CharField(max_length=16, choices=Language.choices, null=True, blank=True)
    job = models.OneToOneField(
        Job, on_delete=models.SET_NULL, null=True, blank=True, related_name="job_history"
    )
    department = models.OneToOneField(
        Department, on_delete=models.SET_NULL, null=True, blank=True, related_name="job_history"
    )
    employee = models.OneToOneField(
        Employee, on_delete=models.SET_NULL, null=True, blank=True, related_name="job_history"
    )

    class Meta:
        db_table = "job_history"
        verbose_name_plural = "job histories"

    def __str__(self):
        return f"JobHistory {self.pk}"
