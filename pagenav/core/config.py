from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagenav.models.page_request import DEFAULT_PAGING_NAVIGATION_NUM


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")

    # Paging defaults applied at the web boundary
    paging_navigation_num: int = Field(
        default=DEFAULT_PAGING_NAVIGATION_NUM,
        ge=0,
        alias="PAGING_NAVIGATION_NUM",
    )
    max_page_size: int = Field(default=500, ge=1, alias="MAX_PAGE_SIZE")


@lru_cache
def get_settings() -> Settings:
    return Settings()
