"""URL builders for the node HTTP API."""

from __future__ import annotations

from typing import Union

BlockId = Union[int, str]


def block_endpoint(base_url: str, hash_or_height: BlockId) -> str:
    """Return the resource URL for a block looked up by height or hash."""

    return f"{base_url.rstrip('/')}/block/{hash_or_height}"
