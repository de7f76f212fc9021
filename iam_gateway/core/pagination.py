"""In-memory pagination over a fully loaded result list."""
from __future__ import annotations
import re
from typing import Callable, Mapping, Optional, Sequence, TypeVar

from .errors import ValidationError
from .models import PaginatedResponse

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 20
INTEGER_PATTERN = re.compile(r"^-?[0-9]+$")


def total_pages(total_items: int, page_size: int) -> int:
    """Integer ceil(total_items / page_size)."""
    return -(-total_items // page_size)


def paginate(
    items: Sequence[T],
    page: int,
    page_size: int,
    transform: Optional[Callable[[T], U]] = None,
) -> PaginatedResponse:
    """Slice one 0-indexed page out of items.

    Out-of-range pages yield an empty item list, never an error. The
    optional transform is applied to the sliced items only.

    Raises:
        ValidationError: If page is negative or page_size is not positive
    """
    if page < 0:
        raise ValidationError("page must be greater than or equal to 0")
    if page_size <= 0:
        raise ValidationError("pageSize must be greater than 0")

    total_items = len(items)
    start = page * page_size
    if start >= total_items:
        page_items = []
    else:
        page_items = list(items[start:min(start + page_size, total_items)])

    if transform is not None:
        page_items = [transform(item) for item in page_items]

    return PaginatedResponse(
        items=page_items,
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages(total_items, page_size),
    )


def _int_param(args: Mapping[str, str], name: str, default: int) -> int:
    raw = args.get(name)
    if raw is None or str(raw).strip() == "":
        return default
    value = str(raw).strip()
    if not INTEGER_PATTERN.match(value):
        raise ValidationError(f"{name} must be an integer")
    return int(value)


def parse_page_params(args: Mapping[str, str]) -> tuple[int, int]:
    """Read ``page`` (default 0) and ``pageSize`` (default 20) from query args.

    Raises:
        ValidationError: If either value is not an integer or out of range
    """
    page = _int_param(args, "page", DEFAULT_PAGE)
    page_size = _int_param(args, "pageSize", DEFAULT_PAGE_SIZE)
    if page < 0:
        raise ValidationError("page must be greater than or equal to 0")
    if page_size <= 0:
        raise ValidationError("pageSize must be greater than 0")
    return page, page_size
