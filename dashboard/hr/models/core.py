from django.db import models

from .location import Location


class Department(models.Model):
    department_name = models.CharField(max_length=255)
    location = models.OneToOneField(
        Location, on_delete=models.SET_NULL, null=True, blank=True, related_name="department"
    )

    class Meta:
        db_table = "department"

    def __str__(self):
        return self.department_name


class Task(models.Model):
    title = models.CharField(max_length=255, null=True, blank=True)
    description = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "task"

    def __str__(self):
        return self.title or f"Task {self.pk}"


class Job(models.Model):
    job_title = models.CharField(max_length=255, null=True, blank=True)
    min_salary = models.BigIntegerField(null=True, blank=True)
    max_salary = models.BigIntegerField(null=True, blank=True)
    tasks = models.ManyToManyField(Task, blank=True, related_name="jobs", db_table="rel_job__task")
    employee = models.ForeignKey(
        "hr.Employee", on_delete=models.SET_NULL, null=True, blank=True, related_name="jobs"
    )

    class Meta:
        db_table = "job"

    def __str__(self):
        return self.job_title or f"Job {self.pk}"
