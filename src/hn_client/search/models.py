"""Typed search hits.

Each model wraps one record of the search API's "hits" array. Raw field
names are kept as aliases so records validate straight from JSON. All models
are frozen; derived values are read-only properties.
"""

import html
import re
from datetime import datetime
from typing import Any, ClassVar, Optional, Union

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PERMALINK_BASE = "https://news.ycombinator.com/item?id="

_PARAGRAPH_WRAPPER = re.compile(r"^\s*<p>(.*?)(?:</p>)?\s*$", re.DOTALL)


def get_permalink(object_id: str) -> str:
    """Hacker News page for an item."""
    return f"{PERMALINK_BASE}{object_id}"


def decode_html_text(text: str) -> str:
    """Strip a wrapping <p> element and decode HTML entities.

    Markup inside the text is left alone, so titles such as
    "Why <blink> died" survive.
    """
    match = _PARAGRAPH_WRAPPER.match(text)
    if match:
        text = match.group(1)
    return html.unescape(text)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, returning None when it cannot be parsed."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (ValueError, AttributeError, TypeError):
        return None


class HighlightResult(BaseModel):
    """Highlighting information for one field of a hit.

    Attributes:
        value: Field value with matches wrapped in <em> tags
        match_level: "none", "partial" or "full"
        matched_words: Query words found in the field
        fully_highlighted: Whether the whole value matched
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    value: str = ""
    match_level: str = Field(default="none", alias="matchLevel")
    matched_words: list[str] = Field(default_factory=list, alias="matchedWords")
    fully_highlighted: Optional[bool] = Field(default=None, alias="fullyHighlighted")


def filter_highlighted_fields(highlights: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Keep only highlight entries that actually matched.

    Args:
        highlights: Raw "_highlightResult" mapping

    Returns:
        Mapping without the entries whose matchLevel is "none" or missing

    Raises:
        ValueError: If highlights is not a mapping
    """
    if not highlights:
        return {}
    if not isinstance(highlights, dict):
        raise ValueError(
            f"_highlightResult must be an object, got {type(highlights).__name__}"
        )

    filtered = {}
    for name, result in highlights.items():
        if isinstance(result, HighlightResult):
            level = result.match_level
        elif isinstance(result, dict):
            level = result.get("matchLevel", result.get("match_level", "none"))
        else:
            # Array-valued highlights are not part of the HN index
            continue
        if level != "none":
            filtered[name] = result
    return filtered


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class Hit(BaseModel):
    """Fields shared by every search hit.

    Attributes:
        highlight_result: Matched fields only (alias "_highlightResult")
        tags: Raw classification tags (alias "_tags")
        author: Username of the poster
        created_at_iso: Creation time as sent upstream (alias "created_at")
        created_at_i: Creation time as a Unix timestamp
        object_id: Item id as a string (alias "objectID")
        updated_at: Last index update, ISO-8601
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    kind: ClassVar[str] = "hit"

    highlight_result: dict[str, HighlightResult] = Field(
        default_factory=dict, alias="_highlightResult"
    )
    tags: list[str] = Field(default_factory=list, alias="_tags")
    author: str = ""
    created_at_iso: Optional[str] = Field(default=None, alias="created_at")
    created_at_i: int
    object_id: str = Field(alias="objectID")
    updated_at: Optional[str] = None

    @field_validator("highlight_result", mode="before")
    @classmethod
    def drop_unmatched_highlights(cls, value: Any) -> dict[str, Any]:
        return filter_highlighted_fields(value)

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, value: Any) -> Any:
        return _none_to_empty_list(value)

    @field_validator("object_id", mode="before")
    @classmethod
    def coerce_object_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @property
    def created_at(self) -> Optional[datetime]:
        """Parsed creation time, None when missing or unparsable."""
        return parse_iso_datetime(self.created_at_iso)

    @property
    def permalink(self) -> str:
        return get_permalink(self.object_id)


class GenericHit(Hit):
    """Hit whose tags match none of the known content kinds."""

    kind: ClassVar[str] = "hit"


class StoryHit(Hit):
    """A story: link post or self post (Ask HN, Show HN, ...)."""

    kind: ClassVar[str] = "story"

    children: list[int] = Field(default_factory=list)
    num_comments: Optional[int] = None
    points: Optional[int] = None
    story_id: int
    story_text: Optional[str] = None
    title: str
    url: Optional[str] = None

    @field_validator("children", mode="before")
    @classmethod
    def default_children(cls, value: Any) -> Any:
        return _none_to_empty_list(value)

    @property
    def is_self_post(self) -> bool:
        return bool(self.story_text)

    @property
    def has_external_url(self) -> bool:
        return bool(self.url)

    @property
    def effective_url(self) -> str:
        """External URL, or the HN permalink for self posts."""
        return self.url or self.permalink

    @property
    def display_title(self) -> str:
        return decode_html_text(self.title)


class CommentHit(Hit):
    """A comment on a story or on another comment."""

    kind: ClassVar[str] = "comment"

    children: list[int] = Field(default_factory=list)
    parent_id: Optional[int] = None
    points: Optional[int] = None
    story_id: int
    story_title: Optional[str] = None
    story_url: Optional[str] = None
    comment_text: Optional[str] = None

    @field_validator("children", mode="before")
    @classmethod
    def default_children(cls, value: Any) -> Any:
        return _none_to_empty_list(value)

    @property
    def is_root_comment(self) -> bool:
        """True when the comment replies to the story itself."""
        return self.parent_id == self.story_id

    @property
    def display_title(self) -> str:
        story_title = decode_html_text(self.story_title or "")
        return f'New comment by {self.author} in "{story_title}"'

    @property
    def decoded_comment_text(self) -> str:
        """Comment body as plain text, paragraphs separated by blank lines."""
        if not self.comment_text:
            return ""
        soup = BeautifulSoup(self.comment_text, "html.parser")
        for paragraph in soup.find_all("p"):
            paragraph.insert_before("\n\n")
        return soup.get_text().strip()


class PollHit(Hit):
    """A poll; its options are separate PollOptionHit records."""

    kind: ClassVar[str] = "poll"

    children: list[int] = Field(default_factory=list)
    num_comments: int = 0
    parts: list[int] = Field(default_factory=list)
    points: Optional[int] = None
    title: str

    @field_validator("children", "parts", mode="before")
    @classmethod
    def default_lists(cls, value: Any) -> Any:
        return _none_to_empty_list(value)

    @field_validator("num_comments", mode="before")
    @classmethod
    def default_num_comments(cls, value: Any) -> Any:
        return 0 if value is None else value


class PollOptionHit(Hit):
    """One option of a poll; points is its vote count."""

    kind: ClassVar[str] = "pollopt"

    points: int = 0

    @field_validator("points", mode="before")
    @classmethod
    def default_points(cls, value: Any) -> Any:
        return 0 if value is None else value


class JobLink(BaseModel):
    """Job posting that links to an external page."""

    model_config = ConfigDict(frozen=True)

    url: str


class JobText(BaseModel):
    """Job posting whose description lives on HN."""

    model_config = ConfigDict(frozen=True)

    text: str


class JobHit(Hit):
    """A YC job posting.

    Upstream sends either "url" or "job_text"; the two shapes are folded
    into ``posting`` so exactly one of them is ever set.
    """

    kind: ClassVar[str] = "job"

    title: str
    posting: Union[JobLink, JobText]

    @model_validator(mode="before")
    @classmethod
    def build_posting(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "posting" in data:
            return data
        data = dict(data)
        url = data.pop("url", None)
        job_text = data.pop("job_text", None)
        if url:
            data["posting"] = JobLink(url=url)
        else:
            data["posting"] = JobText(text=job_text or "")
        return data

    @property
    def url(self) -> Optional[str]:
        return self.posting.url if isinstance(self.posting, JobLink) else None

    @property
    def job_text(self) -> Optional[str]:
        return self.posting.text if isinstance(self.posting, JobText) else None

    @property
    def display_title(self) -> str:
        return decode_html_text(self.title)


AnyHit = Union[StoryHit, CommentHit, PollHit, PollOptionHit, JobHit, GenericHit]
