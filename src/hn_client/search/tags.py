"""Search filter tags and numeric filters.

Top-level tags passed to a search are combined with AND by the upstream API.
An OrTags group serializes to "(a,b,...)" and matches any of its members.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from hn_client.errors import InvalidArgumentError


class ContentTag(str, Enum):
    """Fixed classification tags attached to every indexed item."""

    STORY = "story"
    COMMENT = "comment"
    POLL = "poll"
    POLLOPT = "pollopt"
    SHOW_HN = "show_hn"
    ASK_HN = "ask_hn"
    FRONT_PAGE = "front_page"
    JOB = "job"

    def serialize(self) -> str:
        return self.value


@dataclass(frozen=True)
class AuthorTag:
    """Restricts results to items posted by one user.

    The username is not escaped; upstream usernames are plain identifiers.
    """

    username: str

    def serialize(self) -> str:
        return f"author_{self.username}"


@dataclass(frozen=True)
class StoryScopeTag:
    """Restricts results to items belonging to one story."""

    story_id: Union[int, str]

    def serialize(self) -> str:
        return f"story_{self.story_id}"


Tag = Union[ContentTag, AuthorTag, StoryScopeTag]


@dataclass(frozen=True, init=False)
class OrTags:
    """OR-group of tags.

    Example:
        >>> OrTags([Tags.STORY, Tags.COMMENT]).serialize()
        '(story,comment)'
    """

    tags: tuple[Tag, ...]

    def __init__(self, tags):
        tags = tuple(tags)
        if not tags:
            raise InvalidArgumentError("OrTags requires at least one tag")
        object.__setattr__(self, "tags", tags)

    @classmethod
    def from_tags(cls, *tags: Tag) -> "OrTags":
        return cls(tags)

    def serialize(self) -> str:
        return "(" + ",".join(tag.serialize() for tag in self.tags) + ")"


TagFilter = Union[Tag, OrTags]


def serialize_tags(tags: list[TagFilter]) -> str:
    """Serialize a top-level tag list (AND semantics).

    Args:
        tags: Tags and OR-groups, in the order they should be sent

    Returns:
        Comma-joined tag string, e.g. "(story,poll),author_pg"
    """
    return ",".join(tag.serialize() for tag in tags)


class Tags:
    """Shortcuts for the tag constants and parameterised tag constructors."""

    STORY = ContentTag.STORY
    COMMENT = ContentTag.COMMENT
    POLL = ContentTag.POLL
    POLLOPT = ContentTag.POLLOPT
    SHOW_HN = ContentTag.SHOW_HN
    ASK_HN = ContentTag.ASK_HN
    FRONT_PAGE = ContentTag.FRONT_PAGE
    JOB = ContentTag.JOB

    @staticmethod
    def author(username: str) -> AuthorTag:
        return AuthorTag(username)

    @staticmethod
    def story(story_id: Union[int, str]) -> StoryScopeTag:
        return StoryScopeTag(story_id)


class NumericField(str, Enum):
    """Numeric attributes the search index can filter on."""

    CREATED_AT_UNIX = "created_at_i"
    POINTS = "points"
    NUM_COMMENTS = "num_comments"


class NumericOperator(str, Enum):
    """Comparison operators accepted in numeric filters."""

    LT = "<"
    LTE = "<="
    EQ = "="
    GT = ">"
    GTE = ">="


_NUMERIC_FILTER_PATTERN = re.compile(
    r"^(created_at_i|points|num_comments)(<=|>=|<|>|=)(-?\d+)$"
)


@dataclass(frozen=True)
class NumericFilter:
    """Typed comparison such as points>=100."""

    field: NumericField
    operator: NumericOperator
    value: int

    def __post_init__(self) -> None:
        # Plain strings such as "points" or ">=" are accepted and coerced
        try:
            object.__setattr__(self, "field", NumericField(self.field))
            object.__setattr__(self, "operator", NumericOperator(self.operator))
        except ValueError as e:
            raise InvalidArgumentError(
                f"Unsupported numeric filter: {e}",
                field=self.field,
                operator=self.operator,
            ) from e

    def serialize(self) -> str:
        return f"{self.field.value}{self.operator.value}{self.value}"

    @classmethod
    def parse(cls, expression: str) -> "NumericFilter":
        """Parse the upstream string form of a numeric filter.

        Args:
            expression: Filter such as "created_at_i>=1700000000"

        Returns:
            Equivalent NumericFilter

        Raises:
            InvalidArgumentError: If the expression is not a supported filter
        """
        match = _NUMERIC_FILTER_PATTERN.match(expression.replace(" ", ""))
        if not match:
            raise InvalidArgumentError(
                f"Unsupported numeric filter: '{expression}'", expression=expression
            )
        field, operator, value = match.groups()
        return cls(NumericField(field), NumericOperator(operator), int(value))


def serialize_numeric_filters(filters: list[NumericFilter]) -> str:
    """Comma-join numeric filters (AND semantics upstream)."""
    return ",".join(numeric_filter.serialize() for numeric_filter in filters)
