"""High-level Hacker News client.

Named shortcuts for common listings. Each one pre-fills tags or filters on
SearchParameters and delegates to HNSearchClient.search.

Example:
    >>> client = HackerNewsClient()
    >>> front = await client.front_page()
    >>> hits = await client.search(SearchParameters(query="sqlite", tags=[Tags.STORY]))
    >>> posts = await client.user_submitted("pg")
"""

import logging
import time
from dataclasses import replace
from typing import Final, Optional

from hn_client.item_api.client import HNItemClient
from hn_client.search.client import HNSearchClient, SearchResponse
from hn_client.search.models import StoryHit
from hn_client.search.query import SearchParameters
from hn_client.search.tags import (
    NumericField,
    NumericFilter,
    NumericOperator,
    OrTags,
    TagFilter,
    Tags,
)
from hn_client.utils.config import VERSION

ONE_WEEK_SECONDS: Final[int] = 7 * 24 * 60 * 60
WHO_IS_HIRING_ACCOUNT: Final[str] = "whoishiring"


class HackerNewsClient:
    """Search and item API access behind one object.

    Args:
        debug: Log request URLs and response summaries
        obj_debug: Log construction of each normalized hit
        base_url: Override the search API root
        timeout: Request timeout in seconds, None for no timeout
        logger: Logger receiving debug output
    """

    version: Final[str] = VERSION

    def __init__(
        self,
        debug: Optional[bool] = None,
        obj_debug: Optional[bool] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.search_client = HNSearchClient(
            debug=debug,
            obj_debug=obj_debug,
            base_url=base_url,
            timeout=timeout,
            logger=logger,
        )
        self.items = HNItemClient(timeout=timeout, debug=debug, logger=logger)

    async def _search_with(
        self,
        params: Optional[SearchParameters],
        request_options: dict,
        **overrides,
    ) -> SearchResponse:
        params = replace(params or SearchParameters(), **overrides)
        return await self.search_client.search(params, **request_options)

    async def search(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Custom search with full control over the parameters."""
        return await self.search_client.search(params, **request_options)

    async def front_page(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Front page stories from the last seven days.

        Tags and numeric filters of ``params`` are replaced.
        """
        one_week_ago = int(time.time()) - ONE_WEEK_SECONDS
        return await self._search_with(
            params,
            request_options,
            tags=[Tags.FRONT_PAGE, Tags.STORY],
            numeric_filters=[
                NumericFilter(NumericField.CREATED_AT_UNIX, NumericOperator.GTE, one_week_ago)
            ],
        )

    async def newest(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Newest stories and polls."""
        return await self._search_with(
            params, request_options, tags=[OrTags([Tags.STORY, Tags.POLL])]
        )

    async def comments(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        return await self._search_with(params, request_options, tags=[Tags.COMMENT])

    async def ask_hn(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        return await self._search_with(params, request_options, tags=[Tags.ASK_HN])

    async def show_hn(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        return await self._search_with(params, request_options, tags=[Tags.SHOW_HN])

    async def polls(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        return await self._search_with(params, request_options, tags=[Tags.POLL])

    async def jobs(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        return await self._search_with(params, request_options, tags=[Tags.JOB])

    async def user_all(
        self, user_name: str, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Stories, comments and polls posted by one user."""
        return await self._search_with(
            params,
            request_options,
            tags=[OrTags([Tags.STORY, Tags.COMMENT, Tags.POLL]), Tags.author(user_name)],
        )

    async def user_threads(
        self, user_name: str, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Comments posted by one user."""
        return await self._search_with(
            params, request_options, tags=[Tags.COMMENT, Tags.author(user_name)]
        )

    async def user_submitted(
        self, user_name: str, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Stories and polls submitted by one user."""
        return await self._search_with(
            params,
            request_options,
            tags=[OrTags([Tags.STORY, Tags.POLL]), Tags.author(user_name)],
        )

    async def comments_to_story(
        self,
        story_id: int,
        params: Optional[SearchParameters] = None,
        user_name: Optional[str] = None,
        **request_options,
    ) -> SearchResponse:
        """Comments on one story, optionally only those by one user."""
        tags: list[TagFilter] = [Tags.COMMENT, Tags.story(story_id)]
        if user_name:
            tags.append(Tags.author(user_name))
        return await self._search_with(params, request_options, tags=tags)

    async def who_is_hiring(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Top-level comments of the latest "Who is hiring?" thread.

        Two requests: the newest story by the whoishiring account, then up
        to 100 comments whose parent is that story. If no story is found
        the first (empty) response is returned and no second request is made.
        """
        latest = await self.search_client.search(
            SearchParameters(
                tags=[Tags.STORY, Tags.author(WHO_IS_HIRING_ACCOUNT)],
                hits_per_page=1,
            ),
            **request_options,
        )
        if not latest.data:
            return latest

        story = latest.data[0]
        story_id = story.story_id if isinstance(story, StoryHit) else story.object_id
        return await self._search_with(
            params,
            request_options,
            tags=[Tags.COMMENT],
            filters=f"parent_id={story_id}",
            hits_per_page=100,
        )
