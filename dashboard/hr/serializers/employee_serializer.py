from hr.models import Department, Employee, Job, JobHistory
from .base import EntitySerializer, NestedIdRelatedField, one_to_one


class EmployeeSerializer(EntitySerializer):
    manager = NestedIdRelatedField(queryset=Employee.objects.all(), required=False, allow_null=True)
    department = NestedIdRelatedField(queryset=Department.objects.all(), required=False, allow_null=True)

    class Meta:
        model = Employee
        fields = [
            "id", "first_name", "last_name", "email", "phone_number",
            "hire_date", "salary", "commission_pct", "manager", "department",
        ]


class JobHistorySerializer(EntitySerializer):
    job = one_to_one(JobHistory, Job)
    department = one_to_one(JobHistory, Department)
    employee = one_to_one(JobHistory, Employee)

    class Meta:
        model = JobHistory
        fields = ["id", "start_date", "end_date", "language", "job", "department", "employee"]
