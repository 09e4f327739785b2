from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, List, Optional, TextIO


class TelemetryLogger:
    """Append-only JSONL log of rover simulation events.

    Two kinds of records are written, one JSON object per line:

    - ``step``: one per executed command, with the command character, whether
      it collided, and the rover state after it (the pre-move state on a
      collision).
    - ``result``: one per run, with the outcome summary.

    Every record carries ``event`` and a ``seq`` number that increases across
    all records written by this logger. Writes are serialized with a lock so one
    logger can be shared between runs.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._seq = 0
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_step(
        self,
        step: int,
        command: str,
        state: Dict[str, Any],
        collided: bool = False,
    ) -> None:
        """Record one executed command and the rover state it left behind."""
        record: Dict[str, Any] = {"step": step, "command": command, "collided": collided}
        record.update(state)
        self._write("step", record)

    def log_result(self, summary: Dict[str, Any]) -> None:
        """Record the outcome of a whole run."""
        self._write("result", summary)

    def _write(self, event: str, fields: Dict[str, Any]) -> None:
        if self._fp is None:
            return
        with self._lock:
            record: Dict[str, Any] = {"event": event, "seq": self._seq}
            record.update(fields)
            self._fp.write(json.dumps(record, separators=(",", ":")) + "\n")
            self._fp.flush()
            self._seq += 1

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def load_records(path: str) -> List[Dict[str, Any]]:
    """Read back a JSONL telemetry file, skipping blank or truncated lines."""
    if not os.path.exists(path):
        return []
    records: List[Dict[str, Any]] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return records
