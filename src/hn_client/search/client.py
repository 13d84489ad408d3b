"""Search client for the Hacker News Algolia API.

One call to ``search`` is one GET request: build the query string, fetch,
validate the envelope, normalize the hits.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hn_client.errors import HttpError, MalformedResponseError
from hn_client.search.models import Hit
from hn_client.search.normalizer import normalize_hits
from hn_client.search.query import SearchParameters, build_search_params
from hn_client.utils.config import get_settings
from hn_client.utils.http import fetch_json


class SearchEnvelope(BaseModel):
    """Top-level object of a search response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    hits: list[Any]
    hits_per_page: int = Field(alias="hitsPerPage")
    nb_hits: int = Field(alias="nbHits")
    nb_pages: int = Field(alias="nbPages")
    page: int
    processing_time_ms: int = Field(alias="processingTimeMS")
    server_time_ms: Optional[int] = Field(default=None, alias="serverTimeMS")


@dataclass(frozen=True)
class SearchMeta:
    """Pagination and timing information of a search response.

    Attributes:
        hits_per_page: Page size used by the server
        number_of_hits: Total matches across all pages
        number_of_pages: Pages available at this page size
        current_page: 0-based index of the returned page
        time_ms_processing: Search engine processing time
        time_ms_server: Total server time, None if not reported
    """

    hits_per_page: int
    number_of_hits: int
    number_of_pages: int
    current_page: int
    time_ms_processing: int
    time_ms_server: Optional[int]


@dataclass(frozen=True)
class SearchResponse:
    """One page of search results."""

    meta: SearchMeta
    data: list[Hit]


def parse_envelope(payload: Any) -> SearchEnvelope:
    """Validate a decoded search response body.

    Raises:
        MalformedResponseError: If a required envelope field is missing or
            has the wrong type
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Search response must be an object, got {type(payload).__name__}"
        )
    try:
        return SearchEnvelope.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise MalformedResponseError(
            f"Invalid search response field '{field}': {first['msg']}", field=field
        ) from e


class HNSearchClient:
    """Client for the Algolia-hosted Hacker News search API.

    Holds configuration only; every call opens its own HTTP connection.

    Args:
        debug: Log request URLs and response summaries
        obj_debug: Log construction of each normalized hit
        base_url: Override the API root (default from settings)
        timeout: Request timeout in seconds, None for no timeout
        logger: Logger receiving debug output
    """

    def __init__(
        self,
        debug: Optional[bool] = None,
        obj_debug: Optional[bool] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        settings = get_settings()
        self.debug = settings.HN_DEBUG if debug is None else debug
        self.obj_debug = settings.HN_OBJ_DEBUG if obj_debug is None else obj_debug
        self.base_url = (base_url if base_url is not None else settings.HN_SEARCH_BASE_URL).rstrip("/")
        self.timeout = settings.HN_TIMEOUT if timeout is None else timeout
        self.logger = logger or logging.getLogger(__name__)

    def build_url(self, params: SearchParameters) -> str:
        """Full request URL for the given parameters."""
        return f"{self.base_url}/{params.endpoint}?{build_search_params(params)}"

    async def search(
        self, params: Optional[SearchParameters] = None, **request_options
    ) -> SearchResponse:
        """Search Hacker News.

        Args:
            params: Search parameters, defaults to an unfiltered query
            **request_options: Passed to the HTTP call (headers, timeout, ...)

        Returns:
            SearchResponse with pagination metadata and typed hits

        Raises:
            HttpError: If the API answers with a non-2xx status
            MalformedResponseError: If the body lacks expected fields

        Example:
            >>> client = HNSearchClient()
            >>> res = await client.search(SearchParameters(query="rust", tags=[Tags.STORY]))
        """
        params = params or SearchParameters()
        url = self.build_url(params)

        if self.debug:
            self.logger.debug(f"[REQ] {url}", extra={"url": url})

        try:
            payload = await fetch_json(url, client_timeout=self.timeout, **request_options)
        except HttpError as e:
            if self.debug:
                self.logger.debug(
                    f"[RES ERR] {e.status_code} {e.status_text}",
                    extra={"url": url, "status_code": e.status_code},
                )
            raise

        envelope = parse_envelope(payload)

        if self.debug:
            self.logger.debug(
                f"[RES] {envelope.nb_hits}|{envelope.nb_pages}|{envelope.page}|"
                f"{envelope.hits_per_page} h/pp, {envelope.processing_time_ms}ms processing, "
                f"{envelope.server_time_ms}ms server",
                extra={"url": url},
            )

        data = normalize_hits(envelope.hits, debug=self.obj_debug, log=self.logger)

        return SearchResponse(
            meta=SearchMeta(
                hits_per_page=envelope.hits_per_page,
                number_of_hits=envelope.nb_hits,
                number_of_pages=envelope.nb_pages,
                current_page=envelope.page,
                time_ms_processing=envelope.processing_time_ms,
                time_ms_server=envelope.server_time_ms,
            ),
            data=data,
        )
