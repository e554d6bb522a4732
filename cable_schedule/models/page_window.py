"""Pagination models for cable schedule tables."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """Offset window for one page of a schedule."""

    page: int                    # 1-based, already clamped
    page_size: int
    total_count: int
    total_pages: int

    @property
    def from_index(self) -> int:
        """Index of the first row on the page."""
        return (self.page - 1) * self.page_size

    @property
    def to_index(self) -> int:
        """Index of the last row the page could hold (inclusive)."""
        return self.from_index + self.page_size - 1

    @property
    def offset(self) -> int:
        return self.from_index

    @property
    def limit(self) -> int:
        """Number of rows actually available on the page."""
        remaining = self.total_count - self.from_index
        return max(0, min(self.page_size, remaining))

    @property
    def is_empty(self) -> bool:
        return self.limit == 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def contains(self, index: int) -> bool:
        """Check if an absolute row index falls on this page."""
        return self.from_index <= index < self.from_index + self.limit


@dataclass(frozen=True)
class VisibleRows:
    """Rows of the current page a renderer needs to draw."""

    start: int                   # index into the page
    count: int
    offset_top: float            # pixel offset of the first drawn row
    total_extent: float          # estimated height of the whole page

    @property
    def end(self) -> int:
        """Index one past the last visible row."""
        return self.start + self.count
