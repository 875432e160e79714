from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from transithub.config.models import (
    AppConfig,
    AppSettings,
    DemoSettings,
    LimitSettings,
    LoggingSettings,
)


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def load_dotenv_if_available(path: str = ".env") -> None:
    try:
        from dotenv import load_dotenv  # type: ignore
    except ModuleNotFoundError:
        return
    load_dotenv(path)


def _as_path(value: str, *, base_dir: Path) -> Path:
    candidate = Path(value)
    return candidate if candidate.is_absolute() else (base_dir / candidate)


def _env_bool(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return None


def default_config_path() -> Path:
    return Path(os.getenv("TRANSITHUB_CONFIG_PATH", "config/default.json"))


def load_config(path: Optional[str | Path] = None, *, base_dir: Optional[Path] = None) -> AppConfig:
    """
    Load typed application config from JSON.

    - Missing sections fall back to the dataclass defaults; a missing file is an error.
    - `TRANSITHUB_DEMO_MODE` and `TRANSITHUB_LOG_LEVEL` override the file values.
    - `.env` is loaded when python-dotenv is installed (dev convenience).
    """

    load_dotenv_if_available()

    config_path = Path(path or default_config_path()).resolve()
    base_dir = (base_dir or Path.cwd()).resolve()

    raw = json.loads(config_path.read_text(encoding="utf-8"))

    app_raw: Mapping[str, Any] = raw.get("app", {})
    demo_mode = bool(app_raw.get("demo_mode", True))
    env_demo_mode = _env_bool("TRANSITHUB_DEMO_MODE")
    if env_demo_mode is not None:
        demo_mode = env_demo_mode
    app = AppSettings(
        name=str(app_raw.get("name", "TransitHub")),
        demo_mode=demo_mode,
    )

    limits_raw: Mapping[str, Any] = raw.get("limits", {})
    limits = LimitSettings(
        max_schedules_per_station=int(limits_raw.get("max_schedules_per_station", 10)),
        base_speed_kmh=float(limits_raw.get("base_speed_kmh", 40.0)),
    )
    if limits.max_schedules_per_station < 0:
        raise ValueError(f"Unsupported limits.max_schedules_per_station: {limits.max_schedules_per_station}")
    if limits.base_speed_kmh <= 0:
        raise ValueError(f"Unsupported limits.base_speed_kmh: {limits.base_speed_kmh}")

    demo_raw: Mapping[str, Any] = raw.get("demo", {})
    demo = DemoSettings(
        distance_km=float(demo_raw.get("distance_km", 120.0)),
        fill_attempts=int(demo_raw.get("fill_attempts", 31)),
        limit_probe_count=int(demo_raw.get("limit_probe_count", 12)),
    )
    if demo.distance_km < 0:
        raise ValueError(f"Unsupported demo.distance_km: {demo.distance_km}")

    logging_raw: Mapping[str, Any] = raw.get("logging", {})
    file_value = logging_raw.get("file")
    log_file = None if not file_value else _as_path(str(file_value), base_dir=base_dir)
    logging_settings = LoggingSettings(
        level=str(os.getenv("TRANSITHUB_LOG_LEVEL") or logging_raw.get("level", "INFO")),
        format=str(logging_raw.get("format", "%(asctime)s %(levelname)s %(name)s - %(message)s")),
        file=log_file,
    )

    return AppConfig(app=app, limits=limits, demo=demo, logging=logging_settings)
