"""HTTP GET + JSON helper shared by the search and item API clients."""

from typing import Any, Optional

import httpx

from hn_client.errors import HttpError, MalformedResponseError
from hn_client.utils.config import USER_AGENT


async def fetch_json(
    url: str, client_timeout: Optional[float] = None, **request_options
) -> Any:
    """Issue one GET request and decode the JSON body.

    Args:
        url: Fully built request URL
        client_timeout: Client-wide timeout in seconds, None disables timeouts
        **request_options: Passed unmodified to ``httpx.AsyncClient.get``
            (headers, cookies, timeout, extensions). Caller headers are kept
            but User-Agent is always the library's.

    Returns:
        Decoded JSON body

    Raises:
        HttpError: If the response status is not 2xx
        MalformedResponseError: If the body is not valid JSON
        httpx.TransportError: If the request could not be sent
    """
    headers = httpx.Headers(request_options.pop("headers", None))
    headers["User-Agent"] = USER_AGENT

    async with httpx.AsyncClient(timeout=client_timeout) as client:
        response = await client.get(url, headers=headers, **request_options)

    if not response.is_success:
        raise HttpError(response.status_code, response.reason_phrase, url=url)

    try:
        return response.json()  # httpx.json() is synchronous, not async
    except ValueError as e:
        raise MalformedResponseError(f"Response from {url} is not valid JSON", url=url) from e
