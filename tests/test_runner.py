import asyncio
import json

import httpx
import pytest

from nullsafe.main import create_app
from runner.cli import parse_args
from runner.client import call_op, run_scenario
from runner.smoke import run_smoke
from runner.types import Observed, Scenario, ScenarioError, ScenarioResult
from runner.utils import check_expectations, load_scenarios, parse_scenario, percentile, summarize
from tools.scenarios import SCENARIOS, write_scenarios


def _scenario(op, expect, args=None):
    return Scenario(name="t", op=op, args=args or {}, expect=expect)


def test_percentile():
    assert percentile([], 0.95) == 0.0
    assert percentile([5.0], 0.95) == 5.0
    assert percentile([1.0, 2.0, 3.0, 4.0, 5.0], 0.5) == 3.0


def test_parse_scenario_rejects_bad_documents():
    with pytest.raises(ScenarioError):
        parse_scenario([], source="x.json")
    with pytest.raises(ScenarioError, match="unknown op"):
        parse_scenario({"op": "nope", "expect": {"equal": True}})
    with pytest.raises(ScenarioError):
        parse_scenario({"op": "equal", "expect": {}})
    with pytest.raises(ScenarioError, match="unknown expect keys"):
        parse_scenario({"op": "equal", "expect": {"bogus": 1}})


def test_parse_scenario_names_from_file_stem():
    sc = parse_scenario({"op": "equal", "expect": {"equal": True}}, source="/tmp/abc.json")
    assert sc.name == "abc"
    assert sc.args == {}


def test_load_scenarios(tmp_path):
    write_scenarios(tmp_path)
    loaded = load_scenarios(tmp_path)
    assert len(loaded) == len(SCENARIOS)
    assert {s.name for s in loaded} == {s["name"] for s in SCENARIOS}


def test_load_scenarios_errors(tmp_path):
    with pytest.raises(ScenarioError, match="not found"):
        load_scenarios(tmp_path / "missing")
    with pytest.raises(ScenarioError, match="no scenario files"):
        load_scenarios(tmp_path)
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ScenarioError, match="unreadable"):
        load_scenarios(tmp_path)


def test_check_expectations_equal_and_value():
    assert check_expectations(_scenario("equal", {"equal": True}), Observed(200, {"equal": True})) == []
    assert check_expectations(_scenario("equal", {"equal": True}), Observed(200, {"equal": False}))
    sc = _scenario("first_non_null", {"value": 0})
    assert check_expectations(sc, Observed(200, {"value": 0})) == []
    assert check_expectations(sc, Observed(200, {"value": False}))


def test_check_expectations_error_code():
    sc = _scenario("first_non_null", {"error_code": "both_absent"})
    ok = Observed(422, {"detail": {"error_code": "both_absent", "error_message": "x"}})
    assert check_expectations(sc, ok) == []
    assert check_expectations(sc, Observed(200, {"value": "x"}))
    assert check_expectations(sc, Observed(422, {"detail": [{"msg": "invalid"}]}))


def test_check_expectations_hash_comparisons():
    sc = _scenario("hash", {"same_as": [1], "differs_from": [2]})
    assert check_expectations(sc, Observed(200, {"hash": 32}, same_as_hash=32, differs_from_hash=33)) == []
    problems = check_expectations(sc, Observed(200, {"hash": 32}, same_as_hash=31, differs_from_hash=32))
    assert len(problems) == 2


def test_summarize():
    summary, code = summarize([])
    assert code == 1
    assert summary["scenarios"] == 0

    results = [ScenarioResult("a", True, 1.0), ScenarioResult("b", True, 3.0)]
    summary, code = summarize(results)
    assert code == 0
    assert summary["passed"] == 2
    assert summary["timings"]["max_ms"] == 3.0

    results.append(ScenarioResult("c", False, 2.0, ["boom"]))
    summary, code = summarize(results)
    assert code == 1
    assert summary["failures"] == [{"name": "c", "problems": ["boom"]}]


def test_parse_args_defaults(monkeypatch):
    monkeypatch.setenv("BASE_URL", "http://svc:9000")
    args = parse_args([])
    assert args.base_url == "http://svc:9000"
    assert args.scenarios.endswith("scenarios")
    assert args.timeout == 20.0


def test_smoke_against_app(tmp_path):
    write_scenarios(tmp_path)
    transport = httpx.ASGITransport(app=create_app())
    code = asyncio.run(
        run_smoke(base_url="http://testserver", scenarios_dir=tmp_path, transport=transport)
    )
    assert code == 0


def test_smoke_reports_failures(tmp_path):
    (tmp_path / "wrong.json").write_text(
        json.dumps({"name": "wrong", "op": "equal", "args": {"a": "x"}, "expect": {"equal": True}}),
        encoding="utf-8",
    )
    transport = httpx.ASGITransport(app=create_app())
    code = asyncio.run(
        run_smoke(base_url="http://testserver", scenarios_dir=tmp_path, transport=transport)
    )
    assert code == 1


def _plain_500(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/health":
        return httpx.Response(200, json={"ok": True})
    return httpx.Response(500, text="Internal Server Error")


def test_call_op_tolerates_non_json_answers():
    async def run():
        async with httpx.AsyncClient(
            base_url="http://testserver", transport=httpx.MockTransport(_plain_500)
        ) as client:
            return await call_op(client, "equal", {"a": "x"})

    assert asyncio.run(run()) == (500, {})


def test_smoke_reports_server_errors_as_failures(tmp_path):
    write_scenarios(tmp_path)
    code = asyncio.run(
        run_smoke(
            base_url="http://testserver",
            scenarios_dir=tmp_path,
            transport=httpx.MockTransport(_plain_500),
        )
    )
    assert code == 1


def test_run_scenario_reports_status_of_plain_text_error():
    sc = Scenario(name="eq", op="equal", args={"a": "x", "b": "x"}, expect={"equal": True})

    async def run():
        async with httpx.AsyncClient(
            base_url="http://testserver", transport=httpx.MockTransport(_plain_500)
        ) as client:
            return await run_scenario(client, sc)

    result = asyncio.run(run())
    assert result.passed is False
    assert result.problems == ["expected status 200, got 500"]
