"""Search result normalization.

Pure data transformation layer that turns the raw "hits" array of a search
response into typed hit objects. The only side effect is optional debug
logging of each constructed object.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from hn_client.errors import MalformedResponseError
from hn_client.search.models import (
    CommentHit,
    GenericHit,
    Hit,
    JobHit,
    PollHit,
    PollOptionHit,
    StoryHit,
)
from hn_client.search.tags import ContentTag

logger = logging.getLogger(__name__)

# First match wins
HIT_TYPES_BY_PRIORITY: tuple[tuple[ContentTag, type[Hit]], ...] = (
    (ContentTag.STORY, StoryHit),
    (ContentTag.COMMENT, CommentHit),
    (ContentTag.POLL, PollHit),
    (ContentTag.POLLOPT, PollOptionHit),
    (ContentTag.JOB, JobHit),
)


def classify_hit(raw_hit: dict) -> type[Hit]:
    """Pick the hit model for a raw record from its "_tags" list."""
    raw_tags = raw_hit.get("_tags") or []
    for tag, hit_type in HIT_TYPES_BY_PRIORITY:
        if tag.value in raw_tags:
            return hit_type
    return GenericHit


def normalize_hit(
    raw_hit: dict,
    debug: bool = False,
    log: Optional[logging.Logger] = None,
) -> Hit:
    """Build the typed hit for one raw record.

    Args:
        raw_hit: One element of the response's "hits" array
        debug: Log construction of the object
        log: Logger to use instead of the module logger

    Returns:
        StoryHit, CommentHit, PollHit, PollOptionHit, JobHit or GenericHit

    Raises:
        MalformedResponseError: If the record is not a mapping or lacks
            fields its kind requires
    """
    if not isinstance(raw_hit, dict):
        raise MalformedResponseError(
            f"Hit must be an object, got {type(raw_hit).__name__}", field="hits"
        )

    hit_type = classify_hit(raw_hit)
    try:
        hit = hit_type.model_validate(raw_hit)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise MalformedResponseError(
            f"Invalid {hit_type.kind} hit {raw_hit.get('objectID')}: {first['msg']}",
            field=field,
            object_id=raw_hit.get("objectID"),
        ) from e

    if debug:
        (log or logger).debug(
            f"Created {hit.kind} {hit.object_id}",
            extra={"kind": hit.kind, "object_id": hit.object_id},
        )

    return hit


def normalize_hits(
    hits: list[Any],
    debug: bool = False,
    log: Optional[logging.Logger] = None,
) -> list[Hit]:
    """Normalize a search response's hits, preserving their order.

    Args:
        hits: Raw "hits" array
        debug: Log construction of each object
        log: Logger to use instead of the module logger

    Returns:
        Typed hits in input order

    Raises:
        MalformedResponseError: If hits is not a list or a record is invalid
    """
    if not isinstance(hits, list):
        raise MalformedResponseError("Hits must be a list", field="hits")

    return [normalize_hit(raw_hit, debug=debug, log=log) for raw_hit in hits]
