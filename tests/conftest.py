import os
from typing import Generator

import pytest
import structlog
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("ENV", "test")

ITEMS = list(range(95))


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator:
    from pagenav.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def app() -> FastAPI:
    from pagenav.core.host import init_app
    from pagenav.core.pagination import PageBuilder
    from pagenav.deps import get_page_request
    from pagenav.models import PageRequest

    app = init_app(FastAPI())

    @app.get("/items")
    async def list_items(req: PageRequest = Depends(get_page_request)):
        start = req.page_offset * req.page_size
        content = ITEMS[start:start + req.page_size] if req.page_size else ITEMS
        page = PageBuilder(content).page_request(req).total_elements(len(ITEMS)).build()
        return page.model_dump(mode="json")

    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
