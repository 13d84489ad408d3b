"""Tests for the item API client."""

import logging

import pytest

from hn_client.errors import HttpError, InvalidArgumentError, MalformedResponseError
from hn_client.item_api import HNItemClient, Item, ItemType, Updates, User

STORY_ITEM = {
    "by": "dhouston",
    "descendants": 71,
    "id": 8863,
    "kids": [8952, 9224],
    "score": 111,
    "time": 1175714200,
    "title": "My YC app: Dropbox - Throw away your USB drive",
    "type": "story",
    "url": "http://www.getdropbox.com/u/2/screencast.html",
}


def _requested_url(mock_http) -> str:
    return mock_http.get.call_args.args[0]


class TestStoryLists:
    """Tests for the id list endpoints."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [
            ("top_stories", "topstories.json"),
            ("new_stories", "newstories.json"),
            ("best_stories", "beststories.json"),
            ("ask_stories", "askstories.json"),
            ("show_stories", "showstories.json"),
            ("job_stories", "jobstories.json"),
        ],
    )
    async def test_id_lists(self, mock_http, response_factory, method, path):
        mock_http.get.return_value = response_factory([3, 2, 1])

        ids = await getattr(HNItemClient(), method)()

        assert ids == [3, 2, 1]
        assert _requested_url(mock_http) == f"https://hacker-news.firebaseio.com/v0/{path}"

    @pytest.mark.asyncio
    async def test_id_list_must_be_list(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory({"oops": True})

        with pytest.raises(MalformedResponseError, match="list of ids"):
            await HNItemClient().top_stories()

    @pytest.mark.asyncio
    async def test_max_item_id(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(41000000)

        assert await HNItemClient().max_item_id() == 41000000
        assert _requested_url(mock_http).endswith("/v0/maxitem.json")

    @pytest.mark.asyncio
    async def test_max_item_id_not_integer(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory("many")

        with pytest.raises(MalformedResponseError):
            await HNItemClient().max_item_id()


class TestItemsAndUsers:
    """Tests for single item and user lookups."""

    @pytest.mark.asyncio
    async def test_item(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(STORY_ITEM)

        item = await HNItemClient().item(8863)

        assert isinstance(item, Item)
        assert item.type is ItemType.STORY
        assert item.by == "dhouston"
        assert item.kids == [8952, 9224]
        assert item.parts == []
        assert item.deleted is False
        assert _requested_url(mock_http) == "https://hacker-news.firebaseio.com/v0/item/8863.json"

    @pytest.mark.asyncio
    async def test_unknown_item_is_none(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(None)

        assert await HNItemClient().item(0) is None

    @pytest.mark.asyncio
    async def test_deleted_item(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory({"id": 5, "deleted": True, "time": 1})

        item = await HNItemClient().item(5)

        assert item.deleted is True
        assert item.type is None

    @pytest.mark.asyncio
    async def test_invalid_item_payload(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory({"type": "story"})

        with pytest.raises(MalformedResponseError) as exc_info:
            await HNItemClient().item(1)

        assert exc_info.value.field == "item/1.json"

    @pytest.mark.asyncio
    async def test_user(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(
            {"id": "pg", "created": 1160418092, "karma": 155111, "submitted": [1, 2]}
        )

        user = await HNItemClient().user("pg")

        assert user == User(id="pg", created=1160418092, karma=155111, submitted=[1, 2])
        assert _requested_url(mock_http).endswith("/v0/user/pg.json")

    @pytest.mark.asyncio
    async def test_unknown_user_is_none(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(None)

        assert await HNItemClient().user("nobody-here") is None

    @pytest.mark.asyncio
    async def test_updates(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(
            {"items": [8423305, 8420805], "profiles": ["thefox", "mdda"]}
        )

        updates = await HNItemClient().updates()

        assert updates == Updates(items=[8423305, 8420805], profiles=["thefox", "mdda"])


class TestTopStoryItems:
    """Tests for top_story_items."""

    @pytest.mark.asyncio
    async def test_fetches_in_ranking_order(self, mock_http, response_factory):
        """Test that items follow the id list and missing ones are skipped."""
        mock_http.get.side_effect = [
            response_factory([30, 20, 10, 5]),
            response_factory({"id": 30, "type": "story"}),
            response_factory(None),
            response_factory({"id": 10, "type": "job"}),
        ]

        stories = await HNItemClient().top_story_items(limit=3)

        assert [story.id for story in stories] == [30, 10]
        assert mock_http.get.await_count == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -1])
    async def test_limit_must_be_positive(self, mock_http, limit):
        with pytest.raises(InvalidArgumentError, match="positive"):
            await HNItemClient().top_story_items(limit=limit)

        mock_http.get.assert_not_awaited()


class TestItemClientConfig:
    """Tests for client configuration and errors."""

    @pytest.mark.asyncio
    async def test_http_error(self, mock_http, response_factory):
        mock_http.get.return_value = response_factory(
            None, status_code=401, reason_phrase="Unauthorized"
        )

        with pytest.raises(HttpError) as exc_info:
            await HNItemClient().item(1)

        assert exc_info.value.status_code == 401
        assert exc_info.value.url.endswith("/item/1.json")

    @pytest.mark.asyncio
    async def test_base_url_from_settings(self, mock_http, response_factory, monkeypatch):
        monkeypatch.setenv("HN_ITEM_API_BASE_URL", "http://localhost:8080/v0/")
        mock_http.get.return_value = response_factory(1)

        await HNItemClient().max_item_id()

        assert _requested_url(mock_http) == "http://localhost:8080/v0/maxitem.json"

    @pytest.mark.asyncio
    async def test_debug_logs_request(self, mock_http, response_factory, caplog):
        caplog.set_level(logging.DEBUG, logger="hn_client")
        mock_http.get.return_value = response_factory([])

        await HNItemClient(debug=True).new_stories()

        assert "[REQ] https://hacker-news.firebaseio.com/v0/newstories.json" in [
            r.getMessage() for r in caplog.records
        ]
