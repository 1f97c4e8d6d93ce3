from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx

from runner.logging_conf import get_logger
from runner.types import CallError, HealthError, Observed, Scenario, ScenarioResult
from runner.utils import check_expectations

logger = get_logger("runner.client")

OP_PATHS = {
    "equal": "/objects/equal",
    "hash": "/objects/hash",
    "first_non_null": "/objects/first_non_null",
}


async def wait_for_health(client: httpx.AsyncClient, timeout_s: float = 20.0) -> None:
    """Ping /health until it returns ok or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        try:
            r = await client.get("/health")
            if r.status_code == 200 and r.json().get("ok") is True:
                logger.info("health.ok", extra={"event": "health_ok"})
                return
        except httpx.HTTPError as e:
            logger.debug("health.wait", extra={"event": "health_wait", "error": str(e)})
        await asyncio.sleep(0.25)
    raise HealthError("Health check did not pass within timeout")


async def call_op(
    client: httpx.AsyncClient, op: str, payload: dict[str, Any], *, retries: int = 3
) -> tuple[int, dict[str, Any]]:
    """POST one operation and return (status_code, json body), with retry.

    Only transport errors are retried; any HTTP answer, 4xx included, is returned.
    """
    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            r = await client.post(OP_PATHS[op], json=payload)
            break
        except httpx.TransportError as e:
            last_err = e
            logger.warning(
                "call.retry",
                extra={"event": "call_retry", "op": op, "attempt": attempt + 1, "error": str(e)},
            )
    else:
        raise CallError(f"{op} failed: {last_err}")
    try:
        body = r.json()
    except ValueError:
        # non-JSON answers (e.g. a plain-text 500) are judged on status alone
        body = {}
    return r.status_code, body if isinstance(body, dict) else {}


async def _hash_of(client: httpx.AsyncClient, values: list[Any]) -> int | None:
    status_code, body = await call_op(client, "hash", {"values": values})
    return body.get("hash") if status_code == 200 else None


async def run_scenario(client: httpx.AsyncClient, scenario: Scenario) -> ScenarioResult:
    """Execute one scenario and check its expectations."""
    start = time.perf_counter()
    try:
        status_code, body = await call_op(client, scenario.op, scenario.args)
        observed = Observed(status_code=status_code, body=body)
        if scenario.op == "hash":
            if "same_as" in scenario.expect:
                observed.same_as_hash = await _hash_of(client, scenario.expect["same_as"])
            if "differs_from" in scenario.expect:
                observed.differs_from_hash = await _hash_of(client, scenario.expect["differs_from"])
        problems = check_expectations(scenario, observed)
    except CallError as e:
        problems = [str(e)]
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    result = ScenarioResult(
        name=scenario.name, passed=not problems, elapsed_ms=elapsed_ms, problems=problems
    )
    log = logger.info if result.passed else logger.warning
    log(
        "scenario.done",
        extra={"event": "scenario_done", "scenario": scenario.name, "passed": result.passed},
    )
    return result


async def run_all(client: httpx.AsyncClient, scenarios: list[Scenario]) -> list[ScenarioResult]:
    """Run scenarios concurrently, preserving input order in the results."""
    return list(await asyncio.gather(*(run_scenario(client, s) for s in scenarios)))
