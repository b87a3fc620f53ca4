import math
from typing import Any, List, Optional, Sequence, Union

def _field_text(record: Any, field: str) -> str:
    value = getattr(record, field, None)
    if value is None:
        return ""
    return str(value.value if hasattr(value, "value") else value)

def filter_records(
    records: Sequence[Any],
    search: Optional[str],
    fields: Sequence[str],
    status: Optional[str] = None,
    status_field: str = "status",
) -> List[Any]:
    """
    Case-insensitive substring search across a fixed field list, plus an
    optional exact status match. Empty search and "all" status match everything.
    Input order is preserved.
    """
    term = (search or "").lower()
    want_status = None if not status or status == "all" else status

    matched = []
    for record in records:
        if term and not any(term in _field_text(record, f).lower() for f in fields):
            continue
        if want_status is not None and _field_text(record, status_field) != want_status:
            continue
        matched.append(record)
    return matched

def total_pages(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))

def paginate(records: Sequence[Any], page: int, page_size: int):
    """
    Slice one page out of the filtered records.
    The requested page is clamped into [1, total_pages].
    Returns (items, page, total_pages).
    """
    if page_size < 1:
        raise ValueError("page_size must be positive")
    pages = total_pages(len(records), page_size)
    page = min(max(page, 1), pages)
    start = (page - 1) * page_size
    return list(records[start:start + page_size]), page, pages

def page_window(current: int, total: int) -> List[Union[int, str]]:
    """Page buttons: every page up to 7, otherwise first/last around current with gaps."""
    if total <= 7:
        return list(range(1, total + 1))

    window: List[Union[int, str]] = [1]
    if current > 3:
        window.append("...")
    for p in range(max(2, current - 1), min(total - 1, current + 1) + 1):
        window.append(p)
    if current < total - 2:
        window.append("...")
    window.append(total)
    return window
