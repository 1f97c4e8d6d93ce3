from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from runner.types import Observed, Scenario, ScenarioError, ScenarioResult

OPS = frozenset({"equal", "hash", "first_non_null"})
_EXPECT_KEYS = frozenset({"equal", "value", "error_code", "same_as", "differs_from"})


def percentile(values: list[float], p: float) -> float:
    """Compute the p-th percentile using linear interpolation."""
    if not values:
        return 0.0
    s = sorted(values)
    k = (len(s) - 1) * p
    f = int(k)
    c = min(f + 1, len(s) - 1)
    if f == c:
        return s[f]
    d0 = s[f] * (c - k)
    d1 = s[c] * (k - f)
    return d0 + d1


def parse_scenario(data: Any, *, source: str = "") -> Scenario:
    """Validate a decoded scenario document and build a `Scenario`."""
    if not isinstance(data, dict):
        raise ScenarioError(f"{source}: scenario must be a JSON object")
    op = data.get("op")
    if op not in OPS:
        raise ScenarioError(f"{source}: unknown op {op!r}")
    args = data.get("args", {})
    expect = data.get("expect")
    if not isinstance(args, dict) or not isinstance(expect, dict) or not expect:
        raise ScenarioError(f"{source}: args must be an object and expect a non-empty object")
    unknown = set(expect) - _EXPECT_KEYS
    if unknown:
        raise ScenarioError(f"{source}: unknown expect keys {sorted(unknown)}")
    return Scenario(
        name=str(data.get("name") or Path(source).stem),
        op=op,
        args=args,
        expect=expect,
        source=source,
    )


def load_scenarios(scenarios_dir: Path) -> list[Scenario]:
    """Load every *.json scenario under `scenarios_dir`, sorted by path."""
    if not scenarios_dir.is_dir():
        raise ScenarioError(f"scenarios directory not found: {scenarios_dir}")
    files = sorted(scenarios_dir.rglob("*.json"))
    if not files:
        raise ScenarioError(f"no scenario files in {scenarios_dir}")
    out: list[Scenario] = []
    for path in files:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ScenarioError(f"{path}: unreadable scenario ({e})") from e
        out.append(parse_scenario(data, source=str(path)))
    return out


def check_expectations(scenario: Scenario, observed: Observed) -> list[str]:
    """Compare an observed answer against the scenario; return the mismatches."""
    exp = scenario.expect
    body = observed.body
    problems: list[str] = []

    if "error_code" in exp:
        detail = body.get("detail") if isinstance(body.get("detail"), dict) else {}
        if observed.status_code != 422:
            problems.append(f"expected status 422, got {observed.status_code}")
        if detail.get("error_code") != exp["error_code"]:
            problems.append(
                f"expected error_code {exp['error_code']!r}, got {detail.get('error_code')!r}"
            )
        return problems

    if observed.status_code != 200:
        return [f"expected status 200, got {observed.status_code}"]

    if "equal" in exp and body.get("equal") is not exp["equal"]:
        problems.append(f"expected equal={exp['equal']}, got {body.get('equal')!r}")
    if "value" in exp:
        got = body.get("value")
        # type() check so 1 and True are not confused
        if got != exp["value"] or type(got) is not type(exp["value"]):
            problems.append(f"expected value {exp['value']!r}, got {got!r}")
    if "same_as" in exp and observed.same_as_hash != body.get("hash"):
        problems.append(
            f"hash {body.get('hash')} differs from hash of {exp['same_as']!r} ({observed.same_as_hash})"
        )
    if "differs_from" in exp and observed.differs_from_hash == body.get("hash"):
        problems.append(f"hash {body.get('hash')} collides with hash of {exp['differs_from']!r}")
    return problems


def summarize(results: list[ScenarioResult]) -> tuple[dict, int]:
    """Compute summary dict and an exit code from scenario results."""
    durations_ms = [r.elapsed_ms for r in results]
    passed = [r for r in results if r.passed]
    failures = [{"name": r.name, "problems": r.problems} for r in results if not r.passed]

    avg_ms = (sum(durations_ms) / len(durations_ms)) if durations_ms else 0.0
    summary = {
        "component": "runner",
        "event": "summary",
        "scenarios": len(results),
        "passed": len(passed),
        "failed": len(failures),
        "timings": {
            "avg_ms": round(avg_ms, 2),
            "p95_ms": round(percentile(durations_ms, 0.95), 2),
            "max_ms": round(max(durations_ms), 2) if durations_ms else 0.0,
        },
        "failures": failures,
    }
    exit_code = 0 if (results and not failures) else 1
    return summary, exit_code
