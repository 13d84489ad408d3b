"""Firebase item API: story lists, items, users and updates."""

from hn_client.item_api.client import HNItemClient
from hn_client.item_api.models import Item, ItemType, Updates, User

__all__ = ["HNItemClient", "Item", "ItemType", "Updates", "User"]
