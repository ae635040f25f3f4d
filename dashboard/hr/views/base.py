# views/base.py
"""
Generic REST resources for one HR entity.

    /api/<resource>        GET list (named filter / paged / full) + POST create
    /api/<resource>/<pk>   GET + PUT (replace) + PATCH (merge) + DELETE

The service is injected per route: ``LocationListCreateView.as_view(service=...)``.
"""
from __future__ import annotations
import logging
from collections.abc import Mapping

from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import APIView

from hr.exceptions import BadRequestAlertException, EntityNotFoundError
from hr.filters import NamedFilter
from hr.utils.headers import entity_creation_alert, entity_deletion_alert, entity_update_alert
from hr.utils.pagination import PageSortPagination

logger = logging.getLogger(__name__)


class EntityResource(APIView):
    service = None
    serializer_class = None
    entity_name = ""     # key used in alert headers, e.g. "jobHistory"
    url_name = ""        # prefix of the url names, e.g. "job-history"

    @property
    def label(self) -> str:
        return self.service.entity_name

    def get_serializer(self, *args, **kwargs):
        return self.serializer_class(*args, **kwargs)

    def request_body(self, request) -> Mapping:
        if not isinstance(request.data, Mapping):
            raise ParseError("Expected a JSON object")
        return request.data


class EntityListCreateView(EntityResource):
    paginated = False

    def get(self, request):
        named_filter = NamedFilter.parse(request.query_params.get("filter"))
        if self.service.supports(named_filter):
            logger.debug("REST request to get all %s where %s", self.label, named_filter.value)
            records = self.service.find_all_where(named_filter)
            return Response(self.get_serializer(records, many=True).data)

        if self.paginated:
            paginator = PageSortPagination(self.entity_name, self.service.repository.scalar_fields())
            pageable = paginator.get_pageable(request)
            logger.debug("REST request to get a page of %s : %s", self.label, pageable)
            page = self.service.find_page(pageable)
            data = self.get_serializer(page.content, many=True).data
            return paginator.get_paginated_response(data, page)

        logger.debug("REST request to get all %s", self.label)
        return Response(self.get_serializer(self.service.find_all(), many=True).data)

    def post(self, request):
        body = self.request_body(request)
        logger.debug("REST request to save %s : %s", self.label, body)
        if body.get("id") is not None:
            raise BadRequestAlertException(
                f"A new {self.entity_name} cannot already have an ID", self.entity_name, "idexists"
            )
        ser = self.get_serializer(data=body)
        ser.is_valid(raise_exception=True)
        created = self.service.save(ser.validated_data)

        headers = {
            "Location": reverse(f"{self.url_name}-detail", kwargs={"pk": created.pk}),
            **entity_creation_alert(self.entity_name, created.pk),
        }
        return Response(self.get_serializer(created).data, status=status.HTTP_201_CREATED, headers=headers)


class EntityDetailView(EntityResource):

    def check_identity(self, body: Mapping, pk: int) -> None:
        raw = body.get("id")
        if raw is None:
            raise BadRequestAlertException("Invalid id", self.entity_name, "idnull")
        try:
            body_id = int(raw)
        except (TypeError, ValueError):
            raise BadRequestAlertException("Invalid ID", self.entity_name, "idinvalid")
        if isinstance(raw, bool) or body_id != pk:
            raise BadRequestAlertException("Invalid ID", self.entity_name, "idinvalid")

    def get(self, request, pk: int):
        logger.debug("REST request to get %s : %s", self.label, pk)
        obj = self.service.find_one(pk)
        if not obj:
            return Response({"detail": f"{self.label} not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(obj).data)

    def put(self, request, pk: int):
        body = self.request_body(request)
        logger.debug("REST request to update %s : %s, %s", self.label, pk, body)
        self.check_identity(body, pk)
        current = self.service.find_one(pk)
        if current is None:
            raise BadRequestAlertException("Entity not found", self.entity_name, "idnotfound")

        ser = self.get_serializer(current, data=body)
        ser.is_valid(raise_exception=True)
        try:
            updated = self.service.update({**ser.validated_data, "id": pk})
        except EntityNotFoundError:
            # bản ghi bị xóa giữa lúc kiểm tra và lúc ghi
            raise BadRequestAlertException("Entity not found", self.entity_name, "idnotfound")
        return Response(self.get_serializer(updated).data, headers=entity_update_alert(self.entity_name, pk))

    def patch(self, request, pk: int):
        # null trong body nghĩa là "giữ nguyên", không phải "xóa"
        body = {k: v for k, v in self.request_body(request).items() if v is not None}
        logger.debug("REST request to partial update %s partially : %s, %s", self.label, pk, body)
        self.check_identity(body, pk)

        ser = self.get_serializer(self.service.find_one(pk), data=body, partial=True)
        ser.is_valid(raise_exception=True)
        merged = self.service.partial_update({**ser.validated_data, "id": pk})
        return Response(self.get_serializer(merged).data, headers=entity_update_alert(self.entity_name, pk))

    def delete(self, request, pk: int):
        logger.debug("REST request to delete %s : %s", self.label, pk)
        self.service.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT, headers=entity_deletion_alert(self.entity_name, pk))
