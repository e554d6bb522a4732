"""Processing engine for cable schedules."""

from .tags import (
    generate_entry_id,
    generate_group_id,
    implicit_group_id,
    is_implicit_group_id,
    parse_parallel_tag,
)

from .parallel_resolver import (
    resolve_parallel_groups,
    find_parallel_sets,
)

from .cable_splitter import (
    split_entry,
    merge_parallel_set,
)

from .shop_grouping import (
    SHOP_PATTERN,
    UNGROUPED_LABEL,
    extract_shop_key,
    make_shop_key_extractor,
    group_by_shop,
    is_flat_schedule,
)

from .aggregation import (
    aggregate,
    aggregate_groups,
    aggregate_by_schedule,
)

from .pagination import (
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    PaginationState,
    calculate_total_pages,
    compute_window,
    compute_visible_rows,
    slice_page,
)

from .ordering import (
    natural_key,
    sort_by_shop,
    sort_by_tag,
)

__all__ = [
    # Tags
    "generate_entry_id",
    "generate_group_id",
    "implicit_group_id",
    "is_implicit_group_id",
    "parse_parallel_tag",
    # Parallel Resolver
    "resolve_parallel_groups",
    "find_parallel_sets",
    # Splitter
    "split_entry",
    "merge_parallel_set",
    # Shop Grouping
    "SHOP_PATTERN",
    "UNGROUPED_LABEL",
    "extract_shop_key",
    "make_shop_key_extractor",
    "group_by_shop",
    "is_flat_schedule",
    # Aggregation
    "aggregate",
    "aggregate_groups",
    "aggregate_by_schedule",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
    "PaginationState",
    "calculate_total_pages",
    "compute_window",
    "compute_visible_rows",
    "slice_page",
    # Ordering
    "natural_key",
    "sort_by_shop",
    "sort_by_tag",
]
