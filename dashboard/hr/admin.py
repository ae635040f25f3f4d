from django.contrib import admin
from .models import Country, Department, Employee, Job, JobHistory, Location, Region, Task


@admin.register(Region)
class RegionAdmin(admin.ModelAdmin):
    list_display = ("id", "region_name")
    search_fields = ("region_name",)


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ("id", "country_name", "region")
    search_fields = ("country_name",)


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ("id", "street_address", "postal_code", "city", "state_province", "country")
    search_fields = ("street_address", "city", "postal_code")


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("id", "department_name", "location")
    search_fields = ("department_name",)


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("id", "title")
    search_fields = ("title", "description")


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "email", "department", "manager")
    list_filter = ("department",)
    search_fields = ("first_name", "last_name", "email")


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("id", "job_title", "min_salary", "max_salary", "employee")
    search_fields = ("job_title",)
    filter_horizontal = ("tasks",)


@admin.register(JobHistory)
class JobHistoryAdmin(admin.ModelAdmin):
    list_display = ("id", "start_date", "end_date", "language", "employee", "department", "job")
    list_filter = ("language",)
