"""Command line entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List, Optional, Sequence

from .client import BlockResult, ChainClient
from .config import ChainClientConfig, load_config
from .endpoints import BlockId
from .progress import calc_progress
from .ranges import InvalidStepDirection, Step
from .transport import HTTPTransport

LOGGER = logging.getLogger(__name__)


def build_client(config: ChainClientConfig) -> ChainClient:
    transport = HTTPTransport(api_key=config.chain_api_key, timeout=config.chain_api_timeout)
    return ChainClient(config.chain_api_url, transport=transport)


def _resolve_log_level(value: str) -> int:
    name = value.strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _parse_block_id(value: str) -> BlockId:
    """Treat purely numeric identifiers as heights and anything else as a hash."""

    return int(value) if value.isdigit() else value


def _parse_step(value: str) -> Step:
    """Keep whole-number steps as integers so heights stay integral."""

    try:
        return int(value)
    except ValueError:
        return float(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query blocks and sync progress from a node")
    parser.add_argument("--healthcheck", action="store_true", help="Load configuration and exit")
    commands = parser.add_subparsers(dest="command")

    block = commands.add_parser("block", help="Fetch a single block by height or hash")
    block.add_argument("block_id", type=_parse_block_id)

    blocks = commands.add_parser("range", help="Fetch blocks from START towards END (exclusive)")
    blocks.add_argument("start", type=int)
    blocks.add_argument("end", type=int)
    blocks.add_argument("--step", type=_parse_step, default=1)

    progress = commands.add_parser("progress", help="Estimate sync progress from timestamps")
    progress.add_argument("start", type=float)
    progress.add_argument("tip", type=float)
    return parser


def _dump(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _blocks_payload(results: Sequence[BlockResult]) -> List[Any]:
    return [result.block for result in results]


async def _run(config: ChainClientConfig, args: argparse.Namespace) -> int:
    client = build_client(config)
    if args.command == "block":
        result = await client.get_block(args.block_id)
        if not result.ok:
            return 1
        _dump(result.block)
        return 0
    results = await client.get_blocks_in_range(args.start, args.end, args.step)
    failed = sum(1 for result in results if not result.ok)
    if failed:
        LOGGER.warning("%d of %d blocks could not be retrieved", failed, len(results))
    _dump(_blocks_payload(results))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(
        level=_resolve_log_level(config.chain_log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.healthcheck:
        LOGGER.info("Configuration loaded for %s", config.chain_api_url)
        return 0

    if args.command is None:
        parser.print_help()
        return 2

    if args.command == "progress":
        print(calc_progress(args.start, args.tip))
        return 0

    try:
        return asyncio.run(_run(config, args))
    except InvalidStepDirection as exc:
        parser.error(str(exc))
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
