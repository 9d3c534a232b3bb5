"""Client helpers for querying a node's block API and estimating sync progress."""

from .client import BlockFetched, BlockFetchFailed, BlockResult, ChainClient
from .config import ChainClientConfig, load_config
from .progress import SYNC_BUFFER_SECONDS, calc_progress
from .ranges import BlockRange, InvalidStepDirection

__all__ = [
    "SYNC_BUFFER_SECONDS",
    "BlockFetchFailed",
    "BlockFetched",
    "BlockRange",
    "BlockResult",
    "ChainClient",
    "ChainClientConfig",
    "InvalidStepDirection",
    "calc_progress",
    "load_config",
]
