#!/usr/bin/env python3
"""Write the smoke-runner scenario files under <repo>/scenarios."""
from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
OUT = ROOT / "scenarios"

SCENARIOS: list[dict] = [
    {"name": "equal_same_string", "op": "equal",
     "args": {"a": "foo", "b": "foo"}, "expect": {"equal": True}},
    {"name": "equal_different_strings", "op": "equal",
     "args": {"a": "foo", "b": "bar"}, "expect": {"equal": False}},
    {"name": "equal_both_absent", "op": "equal",
     "args": {"a": None, "b": None}, "expect": {"equal": True}},
    {"name": "equal_absent_left", "op": "equal",
     "args": {"a": None, "b": "foo"}, "expect": {"equal": False}},
    {"name": "equal_absent_right", "op": "equal",
     "args": {"a": "foo", "b": None}, "expect": {"equal": False}},
    {"name": "equal_int_float", "op": "equal",
     "args": {"a": 1, "b": 1.0}, "expect": {"equal": True}},
    {"name": "hash_deterministic", "op": "hash",
     "args": {"values": [1, 2, 3]}, "expect": {"same_as": [1, 2, 3]}},
    {"name": "hash_order_sensitive", "op": "hash",
     "args": {"values": [1, 2, 3]}, "expect": {"differs_from": [3, 2, 1]}},
    {"name": "hash_empty_constant", "op": "hash",
     "args": {"values": []}, "expect": {"same_as": []}},
    {"name": "hash_absent_element", "op": "hash",
     "args": {"values": ["a", None]}, "expect": {"same_as": ["a", None], "differs_from": ["a"]}},
    {"name": "first_non_null_first", "op": "first_non_null",
     "args": {"first": "y", "second": "x"}, "expect": {"value": "y"}},
    {"name": "first_non_null_second", "op": "first_non_null",
     "args": {"first": None, "second": "x"}, "expect": {"value": "x"}},
    {"name": "first_non_null_falsy_first", "op": "first_non_null",
     "args": {"first": 0, "second": 5}, "expect": {"value": 0}},
    {"name": "first_non_null_both_absent", "op": "first_non_null",
     "args": {}, "expect": {"error_code": "both_absent"}},
]


def write_scenarios(out_dir: Path = OUT) -> list[Path]:
    """Write one <name>.json per scenario into `out_dir` and return the paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for sc in SCENARIOS:
        path = out_dir / f"{sc['name']}.json"
        path.write_text(json.dumps(sc, indent=2) + "\n", encoding="utf-8")
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    out_dir = Path(args[0]) if args else OUT
    written = write_scenarios(out_dir)
    print(f"Created {len(written)} scenarios in {out_dir}:")
    for p in written:
        print(" -", p.name)


if __name__ == "__main__":
    main()
