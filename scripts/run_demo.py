from __future__ import annotations

import sys
from pathlib import Path

# Allow running scripts without requiring an editable install (`pip install -e .`).
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

import argparse
import logging

from transithub.config.loader import load_config
from transithub.demo.repository import DemoRepository
from transithub.demo.scenario import run_demo
from transithub.utils.logging import configure_logging


logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the fixed station/vehicle/passenger demo sequence.")
    parser.add_argument("--config", default=None, help="Config JSON path.")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.logging, force=True)

    registry = DemoRepository(config).build_registry()
    report = run_demo(registry, config.demo)
    print(report.text())
    logger.info(
        "Demo done. fill_ok=%s fill_failed=%s rejected_schedules=%s",
        report.fill_successes,
        report.fill_failures,
        len(report.rejected_schedule_times),
    )


if __name__ == "__main__":
    main()
