import pytest

from iam_gateway.core.errors import ValidationError
from iam_gateway.core.pagination import paginate, parse_page_params, total_pages


def test_two_items_fit_on_first_page():
    response = paginate(["a", "b"], page=0, page_size=20)
    assert response.items == ["a", "b"]
    assert response.total_items == 2
    assert response.total_pages == 1


def test_empty_result_has_zero_pages():
    response = paginate([], page=0, page_size=20)
    assert response.items == []
    assert response.total_items == 0
    assert response.total_pages == 0


def test_out_of_range_page_returns_empty_items():
    response = paginate([1, 2, 3], page=5, page_size=10)
    assert response.items == []
    assert response.page == 5
    assert response.total_items == 3
    assert response.total_pages == 1


def test_last_page_is_partial():
    response = paginate(list(range(25)), page=1, page_size=10)
    assert response.items == list(range(10, 20))
    response = paginate(list(range(25)), page=2, page_size=10)
    assert response.items == list(range(20, 25))
    assert response.total_pages == 3


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 37])
@pytest.mark.parametrize("page_size", [1, 3, 10])
def test_pages_cover_all_items_exactly_once(total, page_size):
    items = list(range(total))
    pages = total_pages(total, page_size)
    collected = []
    for page in range(pages + 1):
        response = paginate(items, page, page_size)
        assert len(response.items) <= page_size
        assert response.total_pages == pages
        collected.extend(response.items)
    assert collected == items


def test_transform_applies_to_page_items_only():
    seen = []

    def transform(item):
        seen.append(item)
        return item * 10

    response = paginate([1, 2, 3, 4], page=1, page_size=2, transform=transform)
    assert response.items == [30, 40]
    assert seen == [3, 4]


@pytest.mark.parametrize("page,page_size", [(-1, 10), (0, 0), (0, -5)])
def test_invalid_page_values_rejected(page, page_size):
    with pytest.raises(ValidationError):
        paginate([1], page, page_size)


def test_page_params_defaults():
    assert parse_page_params({}) == (0, 20)


def test_page_params_parsed():
    assert parse_page_params({"page": "2", "pageSize": "5"}) == (2, 5)


@pytest.mark.parametrize(
    "args,message",
    [
        ({"page": "abc"}, "page must be an integer"),
        ({"pageSize": "1_0"}, "pageSize must be an integer"),
        ({"page": "+5"}, "page must be an integer"),
        ({"pageSize": "2.5"}, "pageSize must be an integer"),
        ({"page": "-1"}, "page must be greater than or equal to 0"),
        ({"pageSize": "0"}, "pageSize must be greater than 0"),
    ],
)
def test_page_params_invalid(args, message):
    with pytest.raises(ValidationError) as exc_info:
        parse_page_params(args)
    assert exc_info.value.message == message
    assert exc_info.value.status == 400


def test_paginated_response_serializes_camel_case():
    body = paginate([], page=0, page_size=20).to_dict()
    assert body == {"items": [], "page": 0, "pageSize": 20, "totalItems": 0, "totalPages": 0}
