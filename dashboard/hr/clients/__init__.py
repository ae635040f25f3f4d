from .entity_client import EntityListClient, InfiniteScrollCursor, PageResult

__all__ = ["EntityListClient", "InfiniteScrollCursor", "PageResult"]
