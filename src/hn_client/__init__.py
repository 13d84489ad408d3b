"""Typed async client for the Hacker News search and item APIs."""

from hn_client.client import HackerNewsClient
from hn_client.errors import (
    HNClientError,
    HttpError,
    InvalidArgumentError,
    MalformedResponseError,
)
from hn_client.item_api import HNItemClient, Item, ItemType, Updates, User
from hn_client.search import (
    AuthorTag,
    CommentHit,
    ContentTag,
    GenericHit,
    HighlightResult,
    Hit,
    HNSearchClient,
    JobHit,
    JobLink,
    JobText,
    NumericField,
    NumericFilter,
    NumericOperator,
    OrTags,
    PollHit,
    PollOptionHit,
    SearchMeta,
    SearchParameters,
    SearchResponse,
    StoryHit,
    StoryScopeTag,
    Tags,
)
from hn_client.utils.config import VERSION

__version__ = VERSION

__all__ = [
    "AuthorTag",
    "CommentHit",
    "ContentTag",
    "GenericHit",
    "HNClientError",
    "HNItemClient",
    "HNSearchClient",
    "HackerNewsClient",
    "HighlightResult",
    "Hit",
    "HttpError",
    "InvalidArgumentError",
    "Item",
    "ItemType",
    "JobHit",
    "JobLink",
    "JobText",
    "MalformedResponseError",
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
    "Updates",
    "User",
    "__version__",
]
