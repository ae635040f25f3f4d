# ============================================
# hr/clients/entity_client.py
# ============================================
"""
HTTP client for the paged HR list endpoints and the infinite-scroll cursor
used by list screens.

The cursor asks for pages strictly in increasing order. A page that fails to
load raises and leaves the cursor where it was, so calling ``load_next``
again retries the same page.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageResult:
    items: List[Dict[str, Any]]
    total: int
    page: int


class EntityListClient:
    """Client to read one HR resource list (e.g. ``employees``) page by page"""

    TIMEOUT = 5

    def __init__(
        self,
        resource: str,
        *,
        base_url: Optional[str] = None,
        page_size: int = 20,
        sort: Sequence[str] = ("id,asc",),
        named_filter: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or getattr(settings, "HR_API_BASE_URL", "http://localhost:8000/api")).rstrip("/")
        self.resource = resource.strip("/")
        self.page_size = page_size
        self.sort = tuple(sort)
        self.named_filter = named_filter
        self.session = session or requests.Session()
        self.timeout = timeout or self.TIMEOUT

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.resource}"

    def fetch_page(self, page: int) -> PageResult:
        """GET one page; raises requests.RequestException on failure"""
        params: Dict[str, Any] = {"page": page, "size": self.page_size, "sort": list(self.sort)}
        if self.named_filter:
            params["filter"] = self.named_filter

        response = self.session.get(self.url, params=params, timeout=self.timeout)
        response.raise_for_status()
        items = response.json()
        total_header = response.headers.get("X-Total-Count")
        total = int(total_header) if total_header is not None else len(items)
        logger.debug("Fetched %s page %s (%s items, total %s)", self.resource, page, len(items), total)
        return PageResult(items=items, total=total, page=page)


@dataclass
class InfiniteScrollCursor:
    client: EntityListClient
    items: List[Dict[str, Any]] = field(default_factory=list)
    next_page: int = 0
    total: Optional[int] = None

    @property
    def has_more(self) -> bool:
        if self.total is None:
            return True
        return self.next_page * self.client.page_size < self.total

    def load_next(self) -> List[Dict[str, Any]]:
        """Load the next page and append it; the cursor only moves on success"""
        if not self.has_more:
            return []
        try:
            result = self.client.fetch_page(self.next_page)
        except requests.RequestException as e:
            logger.warning("Error fetching %s page %s: %s", self.client.resource, self.next_page, e)
            raise

        self.items.extend(result.items)
        self.total = result.total
        self.next_page += 1
        return result.items

    def load_all(self) -> List[Dict[str, Any]]:
        while self.has_more:
            if not self.load_next():
                break
        return self.items

    def reset(self) -> None:
        self.items = []
        self.next_page = 0
        self.total = None
