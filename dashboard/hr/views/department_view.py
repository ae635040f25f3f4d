# views/department_view.py
from hr.filters import NamedFilter
from hr.serializers.department_serializer import DepartmentSerializer

from .base import EntityDetailView, EntityListCreateView
from .utils import entity_detail_schema, entity_list_schema

# -----------------------------
# /api/departments  (list + create)
# -----------------------------
@entity_list_schema("Department", DepartmentSerializer, filters=(NamedFilter.JOB_HISTORY_IS_NULL.value,))
class DepartmentListCreateView(EntityListCreateView):
    serializer_class = DepartmentSerializer
    entity_name = "department"
    url_name = "department"


# -----------------------------
# /api/departments/<pk>  (get + put + patch + delete)
# -----------------------------
@entity_detail_schema("Department", DepartmentSerializer)
class DepartmentDetailView(EntityDetailView):
    serializer_class = DepartmentSerializer
    entity_name = "department"
    url_name = "department"
