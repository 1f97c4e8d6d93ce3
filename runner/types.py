from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Scenario:
    """One call against the objects API plus what it should return."""

    name: str
    op: str
    args: dict[str, Any]
    expect: dict[str, Any]
    source: str = ""


@dataclass
class Observed:
    """What the service actually answered for a scenario."""

    status_code: int
    body: dict[str, Any]
    same_as_hash: int | None = None
    differs_from_hash: int | None = None


@dataclass
class ScenarioResult:
    name: str
    passed: bool
    elapsed_ms: float
    problems: list[str] = field(default_factory=list)


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., health never ready)."""


class HealthError(SmokeError):
    """Raised when /health does not report ok within the timeout."""


class ScenarioError(SmokeError):
    """Raised when a scenario file is missing, unreadable or malformed."""


class CallError(SmokeError):
    """Raised when an API call fails after retries."""
