"""Shared FastAPI dependencies."""

from fastapi import Query

from pagenav.core.config import get_settings
from pagenav.core.exceptions import InvalidArgumentError
from pagenav.models.page_request import PageRequest


async def get_page_request(
    page_offset: int = Query(0, ge=0),
    page_size: int = Query(0, ge=0),
    paging_navigation_num: int | None = Query(None, ge=0),
) -> PageRequest:
    """Dependency: build a PageRequest from query params, applying configured defaults."""
    settings = get_settings()
    if page_size > settings.max_page_size:
        raise InvalidArgumentError(
            f"page_size must not exceed {settings.max_page_size}",
            details={"page_size": page_size},
        )
    if paging_navigation_num is None:
        paging_navigation_num = settings.paging_navigation_num
    return PageRequest(
        page_offset=page_offset,
        page_size=page_size,
        paging_navigation_num=paging_navigation_num,
    )
