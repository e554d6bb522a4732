"""Cable Schedule Engine.

Parallel cable grouping, shop grouping, totals and pagination for the cable
schedules of electrical construction projects.
"""

__version__ = "1.0.0"

from .exceptions import (
    CableScheduleError,
    ValidationError,
    ScheduleParseError,
    RepositoryError,
    SettingsError,
)

from .models import (
    CableEntry,
    CableGroup,
    ScheduleTotals,
    PageWindow,
    VisibleRows,
    effective_length,
    effective_cost,
    display_tag,
)

from .engine import (
    resolve_parallel_groups,
    split_entry,
    merge_parallel_set,
    group_by_shop,
    extract_shop_key,
    is_flat_schedule,
    aggregate,
    compute_window,
    compute_visible_rows,
    PaginationState,
)

from .repository import (
    CableEntryRepository,
    InMemoryCableEntryRepository,
)

from .services import (
    ScheduleView,
    ScheduleEditor,
)

from .settings import ScheduleSettings, load_settings

__all__ = [
    # Version
    "__version__",
    # Errors
    "CableScheduleError",
    "ValidationError",
    "ScheduleParseError",
    "RepositoryError",
    "SettingsError",
    # Models
    "CableEntry",
    "CableGroup",
    "ScheduleTotals",
    "PageWindow",
    "VisibleRows",
    "effective_length",
    "effective_cost",
    "display_tag",
    # Engine
    "resolve_parallel_groups",
    "split_entry",
    "merge_parallel_set",
    "group_by_shop",
    "extract_shop_key",
    "is_flat_schedule",
    "aggregate",
    "compute_window",
    "compute_visible_rows",
    "PaginationState",
    # Repository
    "CableEntryRepository",
    "InMemoryCableEntryRepository",
    # Services
    "ScheduleView",
    "ScheduleEditor",
    # Settings
    "ScheduleSettings",
    "load_settings",
]
