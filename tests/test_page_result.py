import pytest
from pydantic import ValidationError

from pagenav.core.pagination import PageBuilder
from pagenav.models import PageRequest


def test_page_is_frozen():
    page = PageBuilder([1, 2, 3]).build()
    with pytest.raises(ValidationError):
        page.total_pages = 5


def test_str_lists_all_fields():
    page = PageBuilder(["a", "b"]).page_size(1).build()
    text = str(page)
    assert text.startswith("PageResult{total_elements=2, total_pages=2")
    assert "previous_navigation=[]" in text
    assert "next_navigation=[2]" in text
    assert "is_first_page=True" in text
    assert text.endswith("content=['a', 'b']}")


def test_model_dump():
    req = PageRequest(page_offset=1, page_size=2, paging_navigation_num=1)
    page = PageBuilder(["c", "d"]).page_request(req).total_elements(6).build()
    data = page.model_dump(mode="json")
    assert data == {
        "total_elements": 6,
        "total_pages": 3,
        "req_page_offset": 1,
        "req_page_size": 2,
        "req_paging_navigation_num": 1,
        "cur_page_offset": 1,
        "cur_page_size": 2,
        "has_previous_page": True,
        "has_next_page": True,
        "is_first_page": False,
        "is_last_page": False,
        "previous_navigation": [1],
        "next_navigation": [3],
        "content": ["c", "d"],
    }


def test_page_is_hashable_with_list_content():
    first = PageBuilder([1, 2]).page_size(1).build()
    second = PageBuilder([1, 2]).page_size(1).build()
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
