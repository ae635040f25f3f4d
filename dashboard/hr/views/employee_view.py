# views/employee_view.py
from hr.filters import NamedFilter
from hr.serializers.employee_serializer import EmployeeSerializer, JobHistorySerializer

from .base import EntityDetailView, EntityListCreateView
from .utils import entity_detail_schema, entity_list_schema

# ==============================================================
# /api/employees  -> GET list (infinite scroll) + POST create
# ==============================================================
@entity_list_schema("Employee", EmployeeSerializer, filters=(NamedFilter.JOB_HISTORY_IS_NULL.value,), paginated=True)
class EmployeeListCreateView(EntityListCreateView):
    serializer_class = EmployeeSerializer
    entity_name = "employee"
    url_name = "employee"
    paginated = True


@entity_detail_schema("Employee", EmployeeSerializer)
class EmployeeDetailView(EntityDetailView):
    serializer_class = EmployeeSerializer
    entity_name = "employee"
    url_name = "employee"


# ==============================================================
# /api/job-histories  -> GET list (infinite scroll) + POST create
# ==============================================================
@entity_list_schema("JobHistory", JobHistorySerializer, paginated=True)
class JobHistoryListCreateView(EntityListCreateView):
    serializer_class = JobHistorySerializer
    entity_name = "jobHistory"
    url_name = "job-history"
    paginated = True


@entity_detail_schema("JobHistory", JobHistorySerializer)
class JobHistoryDetailView(EntityDetailView):
    serializer_class = JobHistorySerializer
    entity_name = "jobHistory"
    url_name = "job-history"
