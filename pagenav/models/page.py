"""Immutable page of results plus navigation meta-data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from pagenav.core.pagination import PageBuilder

T = TypeVar("T")


class PageResult(BaseModel, Generic[T]):
    """
    One page of content with its pagination state.
    Instances come from PageBuilder, which passes already-consistent values
    through model_construct; content is kept by reference, not copied.
    """

    model_config = ConfigDict(frozen=True)

    total_elements: int  # may be corrected upward from the caller's estimate
    total_pages: int  # always >= 1
    req_page_offset: int
    req_page_size: int
    req_paging_navigation_num: int
    cur_page_offset: int  # equals req_page_offset once normalized
    cur_page_size: int  # items actually on this page
    has_previous_page: bool
    has_next_page: bool
    is_first_page: bool
    is_last_page: bool
    previous_navigation: tuple[int, ...]  # one-based, ends at cur_page_offset
    next_navigation: tuple[int, ...]  # one-based, starts at cur_page_offset + 2
    content: Sequence[T]

    @classmethod
    def custom(cls, content: Sequence[T]) -> PageBuilder[T]:
        """Start a builder seeded with this page's content."""
        from pagenav.core.pagination import PageBuilder
        return PageBuilder(content)

    def __hash__(self) -> int:
        # content may be an unhashable list; equal pages still share metadata
        return hash(tuple(v for k, v in self.__dict__.items() if k != "content"))

    def __str__(self) -> str:
        return (
            "PageResult{"
            f"total_elements={self.total_elements}"
            f", total_pages={self.total_pages}"
            f", req_page_offset={self.req_page_offset}"
            f", req_paging_navigation_num={self.req_paging_navigation_num}"
            f", req_page_size={self.req_page_size}"
            f", cur_page_offset={self.cur_page_offset}"
            f", cur_page_size={self.cur_page_size}"
            f", has_previous_page={self.has_previous_page}"
            f", has_next_page={self.has_next_page}"
            f", is_first_page={self.is_first_page}"
            f", is_last_page={self.is_last_page}"
            f", previous_navigation={list(self.previous_navigation)}"
            f", next_navigation={list(self.next_navigation)}"
            f", content={self.content!r}"
            "}"
        )
