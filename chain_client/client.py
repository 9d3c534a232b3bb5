"""Async client for block lookups against the node HTTP API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from requests import RequestException

from .endpoints import BlockId, block_endpoint
from .ranges import BlockRange, Step
from .transport import HTTPTransport

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockFetched:
    identifier: BlockId
    block: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class BlockFetchFailed:
    identifier: BlockId
    error: Exception

    @property
    def ok(self) -> bool:
        return False

    @property
    def block(self) -> None:
        return None


BlockResult = Union[BlockFetched, BlockFetchFailed]


class ChainClient:
    """Fetch blocks one at a time or walk a range of heights sequentially."""

    def __init__(self, base_url: str, transport: Optional[HTTPTransport] = None) -> None:
        self.base_url = base_url
        self.transport = transport or HTTPTransport()

    async def get_block(self, hash_or_height: BlockId) -> BlockResult:
        url = block_endpoint(self.base_url, hash_or_height)
        try:
            block = await asyncio.to_thread(self.transport.fetch_json, url)
        except (RequestException, ValueError) as exc:
            LOGGER.error(
                "Error retrieving block %s: %s",
                hash_or_height,
                exc,
                extra={"url": url},
            )
            return BlockFetchFailed(identifier=hash_or_height, error=exc)
        return BlockFetched(identifier=hash_or_height, block=block)

    async def get_blocks_in_range(
        self, start: int, end: int, step: Step = 1
    ) -> List[BlockResult]:
        """Fetch every block from ``start`` towards ``end`` (exclusive).

        Blocks are requested strictly one after another and returned in
        traversal order. Failed lookups stay in the result as
        :class:`BlockFetchFailed`. Any other error ends the walk and the
        results gathered so far are returned.

        Raises :class:`~chain_client.ranges.InvalidStepDirection` before any
        request when ``step`` points away from ``end``.
        """

        block_range = BlockRange.build(start, end, step)
        blocks: List[BlockResult] = []
        for height in block_range.heights():
            try:
                blocks.append(await self.get_block(height))
            except Exception:  # noqa: BLE001
                LOGGER.exception(
                    "Error retrieving block %s; returning %d of the range",
                    height,
                    len(blocks),
                )
                return blocks
        return blocks
