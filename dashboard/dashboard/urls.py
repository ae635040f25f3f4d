"""
URL configuration for the dashboard project.

Every HR entity resource lives under /api/ (see hr.urls).
"""
# dashboard/urls.py
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("hr.urls")),
]
