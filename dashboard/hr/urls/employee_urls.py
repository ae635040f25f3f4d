from django.urls import path
from hr.views.employee_view import (
    EmployeeListCreateView, EmployeeDetailView,
    JobHistoryListCreateView, JobHistoryDetailView,
)


def build_urlpatterns(container):
    return [
        # /api/employees
        path("employees", EmployeeListCreateView.as_view(service=container.employee_service), name="employee-list-create"),
        path("employees/<int:pk>", EmployeeDetailView.as_view(service=container.employee_service), name="employee-detail"),
        # /api/job-histories
        path(
            "job-histories",
            JobHistoryListCreateView.as_view(service=container.job_history_service),
            name="job-history-list-create",
        ),
        path(
            "job-histories/<int:pk>",
            JobHistoryDetailView.as_view(service=container.job_history_service),
            name="job-history-detail",
        ),
    ]
