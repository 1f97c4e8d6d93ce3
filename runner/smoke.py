#!/usr/bin/env python3
"""High-level smoke runner for the objects API.

Steps:
- wait for server health
- load every scenario file
- run all scenarios concurrently
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx

from runner.cli import parse_args
from runner.client import run_all, wait_for_health
from runner.logging_conf import get_logger, setup_logging
from runner.utils import load_scenarios, summarize

setup_logging()
logger = get_logger("runner")


async def run_smoke(
    *,
    base_url: str,
    scenarios_dir: Path,
    timeout_s: float = 20.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    scenarios = load_scenarios(scenarios_dir)
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0, transport=transport) as client:
        await wait_for_health(client, timeout_s=timeout_s)
        results = await run_all(client, scenarios)
    summary, exit_code = summarize(results)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            scenarios_dir=Path(args.scenarios),
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
