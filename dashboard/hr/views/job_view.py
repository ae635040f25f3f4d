# views/job_view.py
from hr.filters import NamedFilter
from hr.serializers.job_serializer import JobSerializer, TaskSerializer

from .base import EntityDetailView, EntityListCreateView
from .utils import entity_detail_schema, entity_list_schema

# -----------------------------
# /api/tasks
# -----------------------------
@entity_list_schema("Task", TaskSerializer)
class TaskListCreateView(EntityListCreateView):
    serializer_class = TaskSerializer
    entity_name = "task"
    url_name = "task"


@entity_detail_schema("Task", TaskSerializer)
class TaskDetailView(EntityDetailView):
    serializer_class = TaskSerializer
    entity_name = "task"
    url_name = "task"


# -----------------------------
# /api/jobs  (paged)
# -----------------------------
@entity_list_schema("Job", JobSerializer, filters=(NamedFilter.JOB_HISTORY_IS_NULL.value,), paginated=True)
class JobListCreateView(EntityListCreateView):
    serializer_class = JobSerializer
    entity_name = "job"
    url_name = "job"
    paginated = True


@entity_detail_schema("Job", JobSerializer)
class JobDetailView(EntityDetailView):
    serializer_class = JobSerializer
    entity_name = "job"
    url_name = "job"
