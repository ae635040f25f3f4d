from hr.models import Department, Location
from .base import EntitySerializer, one_to_one


class DepartmentSerializer(EntitySerializer):
    location = one_to_one(Department, Location)

    class Meta:
        model = Department
        fields = ["id", "department_name", "location"]
