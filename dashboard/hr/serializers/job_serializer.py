from hr.models import Employee, Job, Task
from .base import EntitySerializer, NestedIdRelatedField


class TaskSerializer(EntitySerializer):
    class Meta:
        model = Task
        fields = ["id", "title", "description"]


class JobSerializer(EntitySerializer):
    tasks = NestedIdRelatedField(many=True, queryset=Task.objects.all(), required=False)
    employee = NestedIdRelatedField(queryset=Employee.objects.all(), required=False, allow_null=True)

    class Meta:
        model = Job
        fields = ["id", "job_title", "min_salary", "max_salary", "tasks", "employee"]
