"""Hacker News item API client.

Thin wrapper over the Firebase API: story id lists, items, users and updates.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from hn_client.errors import InvalidArgumentError, MalformedResponseError
from hn_client.item_api.models import Item, Updates, User
from hn_client.utils.config import get_settings
from hn_client.utils.http import fetch_json


class HNItemClient:
    """Client for https://hacker-news.firebaseio.com/v0/.

    Args:
        base_url: Override the API root (default from settings)
        timeout: Request timeout in seconds, None for no timeout
        debug: Log request URLs
        logger: Logger receiving debug output
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
        logger: Optional[logging.Logger] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.HN_ITEM_API_BASE_URL).rstrip("/")
        self.timeout = settings.HN_TIMEOUT if timeout is None else timeout
        self.debug = settings.HN_DEBUG if debug is None else debug
        self.logger = logger or logging.getLogger(__name__)

    async def _fetch(self, path: str, **request_options) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        if self.debug:
            self.logger.debug(f"[REQ] {url}", extra={"url": url})
        return await fetch_json(url, client_timeout=self.timeout, **request_options)

    async def _fetch_ids(self, path: str, **request_options) -> list[int]:
        ids = await self._fetch(path, **request_options)
        if not isinstance(ids, list):
            raise MalformedResponseError(f"Expected a list of ids from {path}", field=path)
        return ids

    @staticmethod
    def _parse(model: type[BaseModel], payload: Any, path: str):
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Invalid {model.__name__} payload from {path}: {e.errors()[0]['msg']}",
                field=path,
            ) from e

    async def max_item_id(self, **request_options) -> int:
        """Largest item id currently assigned."""
        value = await self._fetch("maxitem.json", **request_options)
        if not isinstance(value, int):
            raise MalformedResponseError("Expected an integer from maxitem.json", field="maxitem")
        return value

    async def top_stories(self, **request_options) -> list[int]:
        return await self._fetch_ids("topstories.json", **request_options)

    async def new_stories(self, **request_options) -> list[int]:
        return await self._fetch_ids("newstories.json", **request_options)

    async def best_stories(self, **request_options) -> list[int]:
        return await self._fetch_ids("beststories.json", **request_options)

    async def ask_stories(self, **request_options) -> list[int]:
        return await self._fetch_ids("askstories.json", **request_options)

    async def show_stories(self, **request_options) -> list[int]:
        return await self._fetch_ids("showstories.json", **request_options)

    async def job_stories(self, **request_options) -> list[int]:
        return await self._fetch_ids("jobstories.json", **request_options)

    async def updates(self, **request_options) -> Updates:
        """Recently changed item ids and usernames."""
        payload = await self._fetch("updates.json", **request_options)
        return self._parse(Updates, payload, "updates.json")

    async def user(self, user_id: str, **request_options) -> Optional[User]:
        """Fetch a user profile.

        Returns:
            The user, or None if no such user exists
        """
        path = f"user/{user_id}.json"
        payload = await self._fetch(path, **request_options)
        if payload is None:
            return None
        return self._parse(User, payload, path)

    async def item(self, item_id: int, **request_options) -> Optional[Item]:
        """Fetch one item.

        Returns:
            The item, or None if the id is unknown
        """
        path = f"item/{item_id}.json"
        payload = await self._fetch(path, **request_options)
        if payload is None:
            return None
        return self._parse(Item, payload, path)

    async def top_story_items(self, limit: int = 30, **request_options) -> list[Item]:
        """Fetch the current top stories as full items.

        Items are fetched one after another, in ranking order. Ids that
        resolve to nothing are skipped.

        Args:
            limit: Maximum number of stories to return

        Raises:
            InvalidArgumentError: If limit is not positive
        """
        if limit <= 0:
            raise InvalidArgumentError("Limit must be positive", limit=limit)

        story_ids = (await self.top_stories(**request_options))[:limit]

        stories = []
        for story_id in story_ids:
            story = await self.item(story_id, **request_options)
            if story:
                stories.append(story)
        return stories
