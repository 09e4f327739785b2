from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from mars_rover.config import MissionConfig
from mars_rover.simulator import simulate
from telemetry.logger import TelemetryLogger


def main() -> int:
    parser = argparse.ArgumentParser(description="Run a rover mission from a YAML config.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/mission.yaml",
        help="Path to mission YAML config.",
    )
    parser.add_argument(
        "--commands",
        type=str,
        default=None,
        help="Command string overriding the one in the config.",
    )
    parser.add_argument(
        "--no-telemetry",
        action="store_true",
        help="Do not write the JSONL telemetry log.",
    )
    args = parser.parse_args()

    mission = MissionConfig.from_file(args.config)
    commands = mission.commands if args.commands is None else args.commands

    telemetry = None
    if mission.telemetry_path and not args.no_telemetry:
        telemetry = TelemetryLogger(mission.telemetry_path)
    try:
        result = simulate(
            mission.rover,
            commands,
            mission.obstacles,
            grid=mission.grid,
            telemetry=telemetry,
        )
    finally:
        if telemetry is not None:
            telemetry.close()

    rover = result.rover
    print(f"Rover at {rover.x},{rover.y} facing {rover.direction.name}")
    if not result.ok:
        print(f"{type(result.error).__name__}: {result.error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
