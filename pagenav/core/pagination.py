"""Pagination helpers: normalization, page totals and navigation windows."""

from typing import Generic, Sequence, TypeVar

from pagenav.core.exceptions import InvalidArgumentError
from pagenav.core.logging import get_logger
from pagenav.models.page import PageResult
from pagenav.models.page_request import DEFAULT_PAGING_NAVIGATION_NUM, PageRequest

T = TypeVar("T")

log = get_logger(__name__)


def _require(value, name: str):
    if value is None:
        raise InvalidArgumentError(f"{name} must not be null")
    return value


def _require_non_negative(value: int, name: str) -> int:
    _require(value, name)
    if value < 0:
        raise InvalidArgumentError(f"{name} must not be negative", details={name: value})
    return value


def compute_total_pages(total_elements: int, page_size: int) -> int:
    """Ceil(total_elements / page_size), never below one page."""
    if page_size == 0:
        return 1
    return max(1, -(-total_elements // page_size))


def previous_navigation(page_offset: int, paging_navigation_num: int) -> tuple[int, ...]:
    """
    One-based page numbers linked before the current page.
    With navigation num 10 and 20 pages: page 5 gets 1..4, page 15 gets 5..14.
    """
    if page_offset <= 0:
        return ()
    page_number = page_offset + 1
    start = max(1, page_number - paging_navigation_num)
    return tuple(range(start, page_number))


def next_navigation(page_offset: int, total_pages: int, paging_navigation_num: int) -> tuple[int, ...]:
    """
    One-based page numbers linked after the current page.
    With navigation num 10 and 20 pages: page 5 gets 6..15, page 15 gets 16..20.
    """
    remaining = total_pages - page_offset - 1
    if remaining <= 0:
        return ()
    page_number = page_offset + 1
    count = min(remaining, paging_navigation_num)
    return tuple(range(page_number + 1, page_number + 1 + count))


class PageBuilder(Generic[T]):
    """
    Single-use builder for PageResult.
    A page_request, when set, wins over page_offset/page_size/paging_navigation_num.
    """

    def __init__(self, content: Sequence[T] | None = None):
        self._content = content
        self._page_request: PageRequest | None = None
        self._page_offset = 0
        self._page_size = 0
        self._paging_navigation_num = DEFAULT_PAGING_NAVIGATION_NUM
        self._total_elements = 0

    def content(self, content: Sequence[T]) -> "PageBuilder[T]":
        self._content = _require(content, "content")
        return self

    def page_offset(self, page_offset: int) -> "PageBuilder[T]":
        self._page_offset = _require_non_negative(page_offset, "page_offset")
        return self

    def page_size(self, page_size: int) -> "PageBuilder[T]":
        self._page_size = _require_non_negative(page_size, "page_size")
        return self

    def paging_navigation_num(self, paging_navigation_num: int) -> "PageBuilder[T]":
        self._paging_navigation_num = _require_non_negative(paging_navigation_num, "paging_navigation_num")
        return self

    def page_request(self, page_request: PageRequest) -> "PageBuilder[T]":
        self._page_request = _require(page_request, "page_request")
        return self

    def total_elements(self, total_elements: int) -> "PageBuilder[T]":
        self._total_elements = _require_non_negative(total_elements, "total_elements")
        return self

    def _resolve(self, content_size: int) -> PageRequest:
        # Effective (offset, size, navigation num); the request object overrides explicit values.
        if self._page_request is not None:
            return self._page_request
        return PageRequest.model_construct(
            page_offset=self._page_offset,
            page_size=self._page_size or content_size,
            paging_navigation_num=self._paging_navigation_num,
        )

    def build(self) -> PageResult[T]:
        content = _require(self._content, "content")
        content_size = len(content)
        total_elements = self._total_elements or content_size
        req = self._resolve(content_size)
        offset, size, nav_num = req.page_offset, req.page_size, req.paging_navigation_num

        previous_pages_total = offset * size
        if content_size and previous_pages_total + size > total_elements:
            corrected = previous_pages_total + content_size
            if corrected != total_elements:
                log.info(
                    "page_total_corrected",
                    declared=total_elements,
                    corrected=corrected,
                    page_offset=offset,
                    page_size=size,
                )
            total_elements = corrected

        total_pages = compute_total_pages(total_elements, size)
        has_previous = offset > 0
        has_next = offset + 1 < total_pages

        return PageResult.model_construct(
            total_elements=total_elements,
            total_pages=total_pages,
            req_page_offset=offset,
            req_page_size=size,
            req_paging_navigation_num=nav_num,
            cur_page_offset=offset,
            cur_page_size=content_size,
            has_previous_page=has_previous,
            has_next_page=has_next,
            is_first_page=not has_previous,
            is_last_page=not has_next,
            previous_navigation=previous_navigation(offset, nav_num) if has_previous else (),
            next_navigation=next_navigation(offset, total_pages, nav_num) if has_next else (),
            content=content,
        )

    create = build
