"""Search parameters and query-string construction.

Pure transformation: SearchParameters in, URL query string out.
No I/O and no logging.
"""

from dataclasses import dataclass, field
from typing import Final, Optional
from urllib.parse import urlencode

from hn_client.errors import InvalidArgumentError
from hn_client.search.tags import (
    NumericFilter,
    TagFilter,
    serialize_numeric_filters,
    serialize_tags,
)

DEFAULT_HITS_PER_PAGE: Final[int] = 100
MIN_HITS_PER_PAGE: Final[int] = 1
MAX_HITS_PER_PAGE: Final[int] = 100
DEFAULT_SEARCHABLE_ATTRIBUTES: Final[tuple[str, ...]] = ("title",)


@dataclass(frozen=True)
class SearchParameters:
    """Structured input for one search request.

    Attributes:
        query: Free text to search for
        tags: Tags and OR-groups, AND-combined at the top level
        numeric_filters: Numeric comparisons, AND-combined
        page: 0-based page number, None leaves the upstream default
        hits_per_page: Page size, clamped to [1, 100], None means 100
        sort_by_date: Use the date-sorted endpoint instead of relevance
        optional_words: Words that boost but do not require a match
        filters: Raw upstream filter expression, sent as-is
        restrict_searchable_attributes: Fields the query matches against,
            defaults to ["title"]
    """

    query: Optional[str] = None
    tags: list[TagFilter] = field(default_factory=list)
    numeric_filters: list[NumericFilter] = field(default_factory=list)
    page: Optional[int] = None
    hits_per_page: Optional[int] = None
    sort_by_date: bool = True
    optional_words: list[str] = field(default_factory=list)
    filters: Optional[str] = None
    restrict_searchable_attributes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.page is not None and self.page < 0:
            raise InvalidArgumentError(
                f"page must be >= 0, got {self.page}", page=self.page
            )

    @property
    def endpoint(self) -> str:
        """Upstream endpoint path selected by sort_by_date."""
        return "search_by_date" if self.sort_by_date else "search"


def effective_hits_per_page(hits_per_page: Optional[int]) -> int:
    """Apply the default and clamp a requested page size.

    Examples:
        >>> effective_hits_per_page(None)
        100
        >>> effective_hits_per_page(-5)
        1
        >>> effective_hits_per_page(500)
        100
    """
    if hits_per_page is None:
        return DEFAULT_HITS_PER_PAGE
    return max(MIN_HITS_PER_PAGE, min(MAX_HITS_PER_PAGE, hits_per_page))


def build_search_params(params: SearchParameters) -> str:
    """Build the URL query string for a search request.

    Keys are emitted in a fixed order so equal parameters always give
    equal strings. hitsPerPage and restrictSearchableAttributes are always
    present; every other key only when it carries a value.

    Args:
        params: Search parameters

    Returns:
        URL-encoded query string (without leading "?")

    Example:
        >>> build_search_params(SearchParameters(query="rust", tags=[Tags.STORY]))
        'query=rust&tags=story&hitsPerPage=100&restrictSearchableAttributes=title'
    """
    pairs: list[tuple[str, str]] = []

    if params.query:
        pairs.append(("query", params.query))

    if params.tags:
        pairs.append(("tags", serialize_tags(params.tags)))

    if params.numeric_filters:
        pairs.append(("numericFilters", serialize_numeric_filters(params.numeric_filters)))

    if params.optional_words:
        pairs.append(("optionalWords", " ".join(params.optional_words)))

    if params.page is not None:
        pairs.append(("page", str(params.page)))

    if params.filters:
        pairs.append(("filters", params.filters))

    pairs.append(("hitsPerPage", str(effective_hits_per_page(params.hits_per_page))))

    attributes = params.restrict_searchable_attributes or DEFAULT_SEARCHABLE_ATTRIBUTES
    pairs.append(("restrictSearchableAttributes", ",".join(attributes)))

    return urlencode(pairs)
