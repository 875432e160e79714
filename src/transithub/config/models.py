from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class AppSettings:
    name: str = "TransitHub"
    demo_mode: bool = True


@dataclass(frozen=True)
class LimitSettings:
    max_schedules_per_station: int = 10
    base_speed_kmh: float = 40.0


@dataclass(frozen=True)
class DemoSettings:
    distance_km: float = 120.0
    fill_attempts: int = 31
    limit_probe_count: int = 12


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    file: Optional[Path] = None


@dataclass(frozen=True)
class AppConfig:
    app: AppSettings = field(default_factory=AppSettings)
    limits: LimitSettings = field(default_factory=LimitSettings)
    demo: DemoSettings = field(default_factory=DemoSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
