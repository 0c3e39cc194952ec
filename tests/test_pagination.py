import math

import pytest

from church_admin.common.pagination import Page, PageQuery, total_pages
from church_admin.common.validators import validate
from church_admin.core.exceptions import ValidationError


def test_defaults():
    q = validate(PageQuery, {})
    assert (q.page, q.limit, q.offset) == (1, 10, 0)


def test_query_string_values_are_coerced():
    q = validate(PageQuery, {"page": "3", "limit": "25"})
    assert (q.page, q.limit, q.offset) == (3, 25, 50)


@pytest.mark.parametrize("args", [{"page": "0"}, {"limit": "0"}, {"limit": "101"}, {"page": "abc"}])
def test_out_of_range_values_are_rejected(args):
    with pytest.raises(ValidationError) as exc:
        validate(PageQuery, args)
    assert exc.value.errors


@pytest.mark.parametrize("total_count", [0, 1, 9, 10, 11, 99, 100, 101])
@pytest.mark.parametrize("limit", [1, 10, 100])
def test_total_pages_is_ceiling(total_count, limit):
    assert total_pages(total_count, limit) == math.ceil(total_count / limit)


def test_page_build():
    q = PageQuery(page=2, limit=3)
    page = Page.build(["d", "e", "f"], total_count=7, query=q)

    assert page.items == ["d", "e", "f"]
    assert page.total_count == 7
    assert page.total_pages == 3
    assert page.current_page == 2
