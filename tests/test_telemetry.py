from __future__ import annotations

from mars_rover.rover import Direction, Rover
from mars_rover.simulator import simulate
from telemetry.logger import TelemetryLogger, load_records


def test_simulation_writes_step_and_result_records(tmp_path) -> None:
    path = str(tmp_path / "logs" / "run.jsonl")
    with TelemetryLogger(path) as telemetry:
        simulate(Rover((0, 0), Direction.EAST), "lfrfrbl", [(1, 2)], telemetry=telemetry)

    records = load_records(path)
    steps = [r for r in records if r["event"] == "step"]
    assert [r["command"] for r in steps] == list("lfrfrb")
    assert [r["collided"] for r in steps] == [False] * 5 + [True]
    assert steps[-1]["x"] == 1 and steps[-1]["y"] == 1

    outcome = records[-1]
    assert outcome["event"] == "result"
    assert outcome["ok"] is False
    assert outcome["error_kind"] == "CollisionError"


def test_parse_error_logs_only_the_result(tmp_path) -> None:
    path = str(tmp_path / "run.jsonl")
    with TelemetryLogger(path) as telemetry:
        simulate(Rover((0, 0), Direction.EAST), "ffx", [], telemetry=telemetry)

    records = load_records(path)
    assert len(records) == 1
    assert records[0]["error"] == "x cannot be parsed"


def test_closed_logger_ignores_records(tmp_path) -> None:
    path = str(tmp_path / "run.jsonl")
    telemetry = TelemetryLogger(path)
    telemetry.close()
    telemetry.log_result({"ok": True})
    assert load_records(path) == []


def test_records_are_numbered_across_runs(tmp_path) -> None:
    path = str(tmp_path / "run.jsonl")
    with TelemetryLogger(path) as telemetry:
        simulate(Rover((0, 0), Direction.EAST), "f", [], telemetry=telemetry)
        simulate(Rover((0, 0), Direction.EAST), "lf", [], telemetry=telemetry)

    records = load_records(path)
    assert [r["seq"] for r in records] == list(range(5))
    assert [r["event"] for r in records] == ["step", "result", "step", "step", "result"]
    assert records[3] == {
        "event": "step",
        "seq": 3,
        "step": 1,
        "command": "f",
        "collided": False,
        "x": 0,
        "y": 1,
        "direction": "N",
    }


def test_load_records_skips_truncated_lines(tmp_path) -> None:
    path = tmp_path / "run.jsonl"
    path.write_text('{"event":"step"}\n\n{"event":\n', encoding="utf-8")
    assert load_records(str(path)) == [{"event": "step"}]
    assert load_records(str(tmp_path / "missing.jsonl")) == []
