from django.urls import path
from hr.views.department_view import (
    DepartmentListCreateView,
    DepartmentDetailView,
)


def build_urlpatterns(container):
    service = container.department_service
    return [
        # /api/departments
        path("departments", DepartmentListCreateView.as_view(service=service), name="department-list-create"),
        # /api/departments/<pk>
        path("departments/<int:pk>", DepartmentDetailView.as_view(service=service), name="department-detail"),
    ]
