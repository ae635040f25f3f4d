# -*- coding: utf-8 -*-
"""
Zero-based page/size/sort pagination for the HR list endpoints.

Query string: ``?page=0&size=20&sort=last_name,desc&sort=first_name``.
The response body stays a plain list; the total goes to ``X-Total-Count``
and the navigation links to ``Link``.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from rest_framework.pagination import BasePagination
from rest_framework.response import Response
from rest_framework.utils.urls import replace_query_param

from hr.exceptions import BadRequestAlertException
from hr.pageable import ASC, DESC, TIE_BREAK_FIELD, Page, Pageable, SortOrder


class PageSortPagination(BasePagination):
    page_size = 20                # mặc định
    page_query_param = "page"
    page_size_query_param = "size"
    sort_query_param = "sort"
    max_page_size = 1000
    max_offset = 2 ** 63 - 1      # giới hạn số nguyên 64-bit của database

    def __init__(self, entity_name: str = "", sortable_fields: Optional[Iterable[str]] = None):
        self.entity_name = entity_name
        self.sortable_fields = set(sortable_fields or ()) | {TIE_BREAK_FIELD}
        self.request = None

    # ---- request -> Pageable
    def get_pageable(self, request) -> Pageable:
        self.request = request
        page = self._int_param(request, self.page_query_param, 0)
        size = self._int_param(request, self.page_size_query_param, self.page_size)
        if page < 0 or size < 1:
            raise BadRequestAlertException("Invalid page request", self.entity_name, "pageinvalid")
        size = min(size, self.max_page_size)
        if (page + 1) * size > self.max_offset:
            raise BadRequestAlertException("Page index out of range", self.entity_name, "pageinvalid")
        sort = tuple(self._parse_sort(v) for v in request.query_params.getlist(self.sort_query_param) if v)
        return Pageable(page=page, size=size, sort=sort)

    def _int_param(self, request, name: str, default: int) -> int:
        raw = request.query_params.get(name)
        if raw in (None, ""):
            return default
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise BadRequestAlertException(f"Invalid {name} parameter", self.entity_name, "pageinvalid")

    def _parse_sort(self, value: str) -> SortOrder:
        parts = [p.strip() for p in value.split(",")]
        field = parts[0]
        direction = parts[1].lower() if len(parts) > 1 and parts[1] else ASC
        if field not in self.sortable_fields or direction not in (ASC, DESC):
            raise BadRequestAlertException(f"Invalid sort: {value}", self.entity_name, "sortinvalid")
        return SortOrder(field, direction)

    # ---- Page -> Response
    def get_paginated_response(self, data, page: Page = None):
        headers = {"X-Total-Count": str(page.total)}
        links = self.get_links(page)
        if links:
            headers["Link"] = ",".join(links)
        return Response(data, headers=headers)

    def get_links(self, page: Page) -> List[str]:
        if self.request is None:
            return []
        url = self.request.build_absolute_uri()
        size = page.pageable.size
        last_page = max(page.total_pages - 1, 0)

        def link(number: int, rel: str) -> str:
            target = replace_query_param(url, self.page_query_param, number)
            target = replace_query_param(target, self.page_size_query_param, size)
            return f'<{target}>; rel="{rel}"'

        links = []
        if page.has_next:
            links.append(link(page.pageable.page + 1, "next"))
        if page.has_previous:
            links.append(link(page.pageable.page - 1, "prev"))
        links.append(link(last_page, "last"))
        links.append(link(0, "first"))
        return links
