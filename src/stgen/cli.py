"""``stgen`` command line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from stgen import config
from stgen.client import SmartThingsClient
from stgen.logging_utils import setup_logging
from stgen.pipeline import run


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stgen",
        description="Generate typed Python clients for the devices, scenes and "
        "locations of a SmartThings account.",
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=config.OUTPUT_DIR,
        help="Output directory for the generated modules (default: %(default)s)",
    )
    token = parser.add_mutually_exclusive_group()
    token.add_argument("-t", "--token", help="Access token for SmartThings")
    token.add_argument(
        "-i", "--token-file",
        type=Path,
        help="Path to a file containing the SmartThings access token",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    return parser


def resolve_token(args: argparse.Namespace) -> str | None:
    if args.token:
        return args.token
    if args.token_file:
        return args.token_file.read_text(encoding="utf-8").strip()
    return config.SMARTTHINGS_TOKEN


async def _generate(token: str, output_dir: str) -> None:
    async with SmartThingsClient(token) as client:
        await run(
            client,
            output_dir,
            max_concurrency=config.MAX_CONCURRENCY,
            max_attempts=config.MAX_ATTEMPTS,
            base_delay=config.RETRY_BASE_DELAY,
        )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        token = resolve_token(args)
    except OSError as exc:
        parser.error(f"cannot read token file: {exc}")
    if not token:
        parser.error("one of --token, --token-file or SMARTTHINGS_TOKEN is required")

    try:
        asyncio.run(_generate(token, args.output_dir))
    except Exception:
        logger.exception("Code generation failed")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
