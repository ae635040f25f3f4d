from rest_framework import serializers
from rest_framework.validators import UniqueValidator


class NestedIdRelatedField(serializers.PrimaryKeyRelatedField):
    """
    Reference rendered as ``{"id": <pk>}``.
    Input accepts the same object or a bare primary key.
    """

    def to_internal_value(self, data):
        if isinstance(data, dict):
            data = data.get("id")
        return super().to_internal_value(data)

    def to_representation(self, value):
        return {"id": value.pk}


def one_to_one(owner, target):
    """Reference on a one-to-one column: each ``target`` row is held by at most one ``owner`` row."""
    return NestedIdRelatedField(
        queryset=target.objects.all(), required=False, allow_null=True,
        validators=[UniqueValidator(queryset=owner.objects.all(), message="This reference is already in use.")],
    )


class EntitySerializer(serializers.ModelSerializer):
    # id được client gửi lên để view kiểm tra; store vẫn tự cấp id khi tạo mới
    id = serializers.IntegerField(required=False, allow_null=True)
