from django.urls import path
from hr.views.job_view import (
    TaskListCreateView, TaskDetailView,
    JobListCreateView, JobDetailView,
)


def build_urlpatterns(container):
    return [
        # /api/tasks
        path("tasks", TaskListCreateView.as_view(service=container.task_service), name="task-list-create"),
        path("tasks/<int:pk>", TaskDetailView.as_view(service=container.task_service), name="task-detail"),
        # /api/jobs
        path("jobs", JobListCreateView.as_view(service=container.job_service), name="job-list-create"),
        path("jobs/<int:pk>", JobDetailView.as_view(service=container.job_service), name="job-detail"),
    ]
