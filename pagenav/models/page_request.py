"""Requested paging parameters, as supplied by the data-access side."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGING_NAVIGATION_NUM = 10


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_offset: int = Field(default=0, ge=0)  # zero-based
    page_size: int = Field(default=0, ge=0)  # 0 = unspecified, one page holds everything
    paging_navigation_num: int = Field(default=DEFAULT_PAGING_NAVIGATION_NUM, ge=0)

    @property
    def page_number(self) -> int:
        return self.page_offset + 1
