"""Paged view over a cable schedule with separately cached project totals."""

import logging
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..engine import (
    PaginationState,
    aggregate,
    compute_visible_rows,
    group_by_shop,
    make_shop_key_extractor,
)
from ..models import CableEntry, CableGroup, PageWindow, ScheduleTotals, VisibleRows
from ..repository import CableEntryRepository
from ..settings import ScheduleSettings


logger = logging.getLogger(__name__)


class ScheduleView:
    """
    State behind a paginated cable schedule table.

    The current page and the whole-project totals come from two separate
    queries. Turning pages or changing the page size never refetches the
    totals; they are refreshed when their cache expires (totals_cache_ttl)
    or when invalidate_totals() is called, so the two may briefly disagree.

    Entries are returned as stored. Parallel sets should be resolved over a
    whole schedule, not over one page, since a set can span a page break.
    """

    def __init__(
        self,
        repository: CableEntryRepository,
        schedule_ids: Sequence[str],
        settings: Optional[ScheduleSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the view.

        Args:
            repository: Data access for cable entries
            schedule_ids: Schedules shown together in the table
            settings: Optional settings, defaults to ScheduleSettings()
            clock: Monotonic time source used for the totals cache
        """
        self.repository = repository
        self.schedule_ids = list(schedule_ids)
        self.settings = settings or ScheduleSettings()
        self._clock = clock
        self.pagination = PaginationState(
            page_size=self.settings.default_page_size,
            page_size_options=list(self.settings.page_size_options),
        )
        self._shop_key = make_shop_key_extractor(self.settings.shop_pattern)

        self._count: Optional[int] = None
        self._page: Optional[Tuple[Tuple[int, int], List[CableEntry]]] = None
        self._totals: Optional[Tuple[float, ScheduleTotals]] = None

    # Page data

    def total_count(self) -> int:
        if self._count is None:
            self._count = self.repository.fetch_entry_count(self.schedule_ids)
        return self._count

    def current_window(self) -> PageWindow:
        return self.pagination.window(self.total_count())

    def current_entries(self) -> List[CableEntry]:
        """Entries of the current page, fetched once per page."""
        window = self.current_window()
        key = (window.page, window.page_size)

        if self._page is None or self._page[0] != key:
            if window.is_empty:
                entries = []
            else:
                entries = self.repository.fetch_entries(
                    self.schedule_ids, window.offset, window.limit
                )
            logger.debug("Fetched page %d (%d rows)", window.page, len(entries))
            self._page = (key, entries)

        return list(self._page[1])

    def page_totals(self) -> ScheduleTotals:
        """Totals of the rows on the current page."""
        return aggregate(self.current_entries())

    def grouped_entries(self, tenant_names: Optional[Dict[str, str]] = None) -> List[CableGroup]:
        """Current page grouped by destination shop."""
        return group_by_shop(
            self.current_entries(),
            tenant_names=tenant_names,
            key_extractor=self._shop_key,
            ungrouped_label=self.settings.ungrouped_label,
        )

    def visible_rows(self, scroll_offset: float, viewport_height: float) -> VisibleRows:
        """Rows of the current page that are on screen."""
        return compute_visible_rows(
            scroll_offset=scroll_offset,
            viewport_height=viewport_height,
            row_height=self.settings.row_height,
            row_count=len(self.current_entries()),
            overscan=self.settings.overscan,
        )

    # Whole-project totals

    def project_totals(self) -> ScheduleTotals:
        """Totals over every entry of the schedules, cached for totals_cache_ttl."""
        now = self._clock()
        if self._totals is not None:
            fetched_at, totals = self._totals
            if now - fetched_at < self.settings.totals_cache_ttl:
                return totals

        totals = self.repository.fetch_aggregate(self.schedule_ids)
        logger.debug("Fetched project totals: %s", totals)
        self._totals = (now, totals)
        return totals

    # Navigation

    def go_to_page(self, page: int) -> PageWindow:
        return self.pagination.go_to(page, self.total_count())

    def next_page(self) -> PageWindow:
        return self.pagination.next_page(self.total_count())

    def previous_page(self) -> PageWindow:
        return self.pagination.previous_page(self.total_count())

    def set_page_size(self, page_size: int) -> PageWindow:
        """Change rows per page; the view returns to page 1."""
        self.pagination.set_page_size(page_size)
        return self.current_window()

    # Invalidation

    def invalidate_page(self):
        """Forget the fetched page and row count, e.g. after an edit."""
        self._count = None
        self._page = None

    def invalidate_totals(self):
        self._totals = None

    def refresh(self):
        self.invalidate_page()
        self.invalidate_totals()
