"""Item API payloads."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):
    JOB = "job"
    STORY = "story"
    COMMENT = "comment"
    POLL = "poll"
    POLLOPT = "pollopt"


class Item(BaseModel):
    """A story, comment, job, poll or poll option.

    Deleted and dead items keep their id but lose most other fields.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    type: Optional[ItemType] = None
    deleted: bool = False
    dead: bool = False
    by: Optional[str] = None
    time: Optional[int] = None
    parent: Optional[int] = None
    text: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    score: Optional[int] = None
    poll: Optional[int] = None
    kids: list[int] = Field(default_factory=list)
    parts: list[int] = Field(default_factory=list)
    descendants: Optional[int] = None


class User(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    created: int
    karma: int = 0
    about: Optional[str] = None
    submitted: list[int] = Field(default_factory=list)


class Updates(BaseModel):
    """Recently changed items and profiles."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    items: list[int] = Field(default_factory=list)
    profiles: list[str] = Field(default_factory=list)
