from pagenav.models.page_request import DEFAULT_PAGING_NAVIGATION_NUM, PageRequest
from pagenav.models.page import PageResult

__all__ = [
    "DEFAULT_PAGING_NAVIGATION_NUM",
    "PageRequest",
    "PageResult",
]
