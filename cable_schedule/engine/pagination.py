"""Page and visible-row windows for large cable schedules."""

import math
from dataclasses import dataclass, field
from typing import List, Sequence, TypeVar

from ..exceptions import ValidationError
from ..models import PageWindow, VisibleRows


DEFAULT_PAGE_SIZE = 100
PAGE_SIZE_OPTIONS = (50, 100, 200, 500)

T = TypeVar("T")


def _check_page_size(page_size: int):
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ValidationError(f"Page size must be an integer, got {page_size!r}")
    if page_size <= 0:
        raise ValidationError(f"Page size must be positive, got {page_size}")


def calculate_total_pages(total_count: int, page_size: int) -> int:
    """Number of pages needed for total_count rows."""
    _check_page_size(page_size)
    return math.ceil(max(0, total_count) / page_size)


def compute_window(page: int, page_size: int, total_count: int) -> PageWindow:
    """
    Compute the offset window for a page.

    Pages outside 1..total_pages are clamped rather than rejected. With no
    rows there are no pages and the window is empty.

    Args:
        page: Requested page (1-based)
        page_size: Rows per page
        total_count: Number of rows in the schedule

    Returns:
        PageWindow for the clamped page

    Raises:
        ValidationError: If page_size is zero or negative
    """
    _check_page_size(page_size)
    total_count = max(0, int(total_count))
    total_pages = calculate_total_pages(total_count, page_size)

    page = max(1, min(int(page), max(total_pages, 1)))

    return PageWindow(
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
    )


def slice_page(rows: Sequence[T], window: PageWindow) -> List[T]:
    """Get the rows of a window from an in-memory sequence."""
    return list(rows[window.offset:window.offset + window.limit])


def compute_visible_rows(
    scroll_offset: float,
    viewport_height: float,
    row_height: float,
    row_count: int,
    overscan: int = 0,
) -> VisibleRows:
    """
    Compute which rows of a page are on screen.

    Args:
        scroll_offset: Pixels scrolled from the top of the page table
        viewport_height: Height of the visible area
        row_height: Estimated height of one row
        row_count: Rows materialised for the current page
        overscan: Extra rows to draw above and below the viewport

    Returns:
        VisibleRows inside 0..row_count
    """
    if row_height <= 0:
        raise ValidationError(f"Row height must be positive, got {row_height}")

    row_count = max(0, row_count)
    total_extent = row_count * row_height
    if row_count == 0:
        return VisibleRows(start=0, count=0, offset_top=0.0, total_extent=0.0)

    scroll_offset = min(max(0.0, scroll_offset), total_extent)
    first = int(scroll_offset // row_height)
    last = math.ceil((scroll_offset + max(0.0, viewport_height)) / row_height)

    start = max(0, first - overscan)
    end = min(row_count, last + overscan)
    start = min(start, end)

    return VisibleRows(
        start=start,
        count=end - start,
        offset_top=start * row_height,
        total_extent=total_extent,
    )


@dataclass
class PaginationState:
    """Current page and page size of a schedule table."""

    page_size: int = DEFAULT_PAGE_SIZE
    page: int = 1
    page_size_options: List[int] = field(default_factory=lambda: list(PAGE_SIZE_OPTIONS))

    def __post_init__(self):
        _check_page_size(self.page_size)
        for option in self.page_size_options:
            _check_page_size(option)

    def window(self, total_count: int) -> PageWindow:
        """Window for the current page, clamping the stored page if needed."""
        window = compute_window(self.page, self.page_size, total_count)
        self.page = window.page
        return window

    def go_to(self, page: int, total_count: int) -> PageWindow:
        self.page = page
        return self.window(total_count)

    def next_page(self, total_count: int) -> PageWindow:
        return self.go_to(self.page + 1, total_count)

    def previous_page(self, total_count: int) -> PageWindow:
        return self.go_to(self.page - 1, total_count)

    def set_page_size(self, page_size: int):
        """
        Change rows per page and return to the first page.

        Raises:
            ValidationError: If the size is not positive or not one of the
                             configured options
        """
        _check_page_size(page_size)
        if self.page_size_options and page_size not in self.page_size_options:
            raise ValidationError(
                f"Page size {page_size} is not one of {self.page_size_options}"
            )
        self.page_size = page_size
        self.page = 1
