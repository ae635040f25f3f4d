# views/utils.py
"""
Shared tooling for drf-spectacular docs on the HR APIView classes.
Usage in your views:
    from .utils import entity_list_schema, entity_detail_schema

    @entity_list_schema("Location", LocationSerializer, filters=("department-is-null",))
    class LocationListCreateView(EntityListCreateView): ...
"""
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers

# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()}
)

AlertErrorSerializer = inline_serializer(
    name="AlertError",
    fields={
        "title": serializers.CharField(),
        "status": serializers.IntegerField(),
        "entityName": serializers.CharField(),
        "errorKey": serializers.CharField(),
        "message": serializers.CharField(),
        "params": serializers.CharField(),
    },
)

# ---- Param helpers

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)

def q_str(name: str, description: str, required: bool = False, enum=None, many: bool = False):
    return OpenApiParameter(
        name, OpenApiTypes.STR, OpenApiParameter.QUERY,
        required=required, description=description, enum=enum, many=many,
    )

# ---- Convenience for common responses

def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(AlertErrorSerializer, description="Bad Request"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs


def page_params():
    return [
        q_int("page", "Zero-based page index"),
        q_int("size", "Page size"),
        q_str("sort", "field[,asc|desc], repeatable", many=True),
    ]


def entity_list_schema(tag: str, serializer_cls, *, filters=(), paginated: bool = False):
    """extend_schema_view for the /api/<entity> list + create view."""
    params = []
    if filters:
        params.append(q_str("filter", "Named filter", enum=list(filters)))
    if paginated:
        params.extend(page_params())
    return extend_schema_view(
        get=extend_schema(
            tags=[tag],
            summary=f"List {tag} records",
            parameters=params,
            responses={200: OpenApiResponse(serializer_cls(many=True)), **std_errors()},
        ),
        post=extend_schema(
            tags=[tag],
            summary=f"Create a {tag}",
            request=serializer_cls,
            responses={201: OpenApiResponse(serializer_cls), **std_errors()},
        ),
    )


def entity_detail_schema(tag: str, serializer_cls):
    """extend_schema_view for the /api/<entity>/<pk> view."""
    pk = [path_int("pk", f"{tag} ID")]
    return extend_schema_view(
        get=extend_schema(
            tags=[tag], summary=f"Get {tag} details", parameters=pk,
            responses={200: OpenApiResponse(serializer_cls), **std_errors()},
        ),
        put=extend_schema(
            tags=[tag], summary=f"Replace {tag}", parameters=pk, request=serializer_cls,
            responses={200: OpenApiResponse(serializer_cls), **std_errors()},
        ),
        patch=extend_schema(
            tags=[tag], summary=f"Partially update {tag} (null fields are ignored)", parameters=pk,
            request=serializer_cls,
            responses={200: OpenApiResponse(serializer_cls), **std_errors()},
        ),
        delete=extend_schema(
            tags=[tag], summary=f"Delete {tag}", parameters=pk,
            responses={204: OpenApiResponse(None, description="Deleted")},
        ),
    )
