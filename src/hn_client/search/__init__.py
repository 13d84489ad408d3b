"""Algolia search API: tags, query building, hit models and the client."""

from hn_client.search.client import HNSearchClient, SearchMeta, SearchResponse
from hn_client.search.models import (
    AnyHit,
    CommentHit,
    GenericHit,
    HighlightResult,
    Hit,
    JobHit,
    JobLink,
    JobText,
    PollHit,
    PollOptionHit,
    StoryHit,
)
from hn_client.search.normalizer import classify_hit, normalize_hits
from hn_client.search.query import SearchParameters, build_search_params
from hn_client.search.tags import (
    AuthorTag,
    ContentTag,
    NumericField,
    NumericFilter,
    NumericOperator,
    OrTags,
    StoryScopeTag,
    Tags,
)

__all__ = [
    "AnyHit",
    "AuthorTag",
    "CommentHit",
    "ContentTag",
    "GenericHit",
    "HNSearchClient",
    "HighlightResult",
    "Hit",
    "JobHit",
    "JobLink",
    "JobText",
    "NumericField",
    "NumericFilter",
    "NumericOperator",
    "OrTags",
    "PollHit",
    "PollOptionHit",
    "SearchMeta",
    "SearchParameters",
    "SearchResponse",
    "StoryHit",
    "StoryScopeTag",
    "Tags",
    "build_search_params",
    "classify_hit",
    "normalize_hits",
]
