"""Wait and browser configuration from environment variables."""

import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from .constants import (
    DEFAULT_ASYNC_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_WAIT_TIME,
)
from .retrying import InvalidConfiguration, validate_budget


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be a number, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass
class WaitConfig:
    wait_time: float = DEFAULT_WAIT_TIME
    poll_interval: float = DEFAULT_POLL_INTERVAL
    async_timeout: float = DEFAULT_ASYNC_TIMEOUT
    headless: bool = True
    fixture_host: str = "127.0.0.1"
    fixture_port: int = 0
    screenshot_dir: Path = field(
        default_factory=lambda: Path("test-results/screenshots")
    )

    def __post_init__(self) -> None:
        validate_budget(self.wait_time, self.poll_interval)
        if not math.isfinite(self.async_timeout) or self.async_timeout <= 0:
            raise InvalidConfiguration(
                f"async_timeout must be finite and > 0, got {self.async_timeout}"
            )
        if not 0 <= self.fixture_port <= 65535:
            raise InvalidConfiguration(
                f"fixture_port out of range: {self.fixture_port}"
            )

    def with_wait_time(self, wait_time: float) -> "WaitConfig":
        return replace(self, wait_time=wait_time)

    @classmethod
    def from_env(cls) -> "WaitConfig":
        return cls(
            wait_time=_env_float("PAGEWAIT_WAIT_TIME", DEFAULT_WAIT_TIME),
            poll_interval=_env_float(
                "PAGEWAIT_POLL_INTERVAL", DEFAULT_POLL_INTERVAL
            ),
            async_timeout=_env_float(
                "PAGEWAIT_ASYNC_TIMEOUT", DEFAULT_ASYNC_TIMEOUT
            ),
            headless=_env_bool("PAGEWAIT_HEADLESS", True),
            fixture_host=os.environ.get("PAGEWAIT_FIXTURE_HOST", "127.0.0.1"),
            fixture_port=_env_int("PAGEWAIT_FIXTURE_PORT", 0),
            screenshot_dir=Path(
                os.environ.get(
                    "PAGEWAIT_SCREENSHOT_DIR", "test-results/screenshots"
                )
            ),
        )
