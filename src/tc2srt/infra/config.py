from __future__ import annotations

import math
import os
from dataclasses import dataclass

SUPPORTED_FRAME_RATES: tuple[float, ...] = (23.976, 24.0, 25.0, 29.97, 30.0, 50.0, 59.94, 60.0)
DEFAULT_FRAME_RATE = 24.0
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_INPUT_SUFFIXES = frozenset({".txt"})
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    fps: float
    encoding: str
    log_level: str


def normalize_frame_rate(value: float | str) -> float:
    try:
        fps = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Frame rate must be a number, got '{value}'.") from exc
    if not math.isfinite(fps) or fps <= 0:
        raise ValueError(f"Frame rate must be positive, got '{value}'.")
    return fps


def is_standard_frame_rate(fps: float) -> bool:
    return any(math.isclose(fps, rate) for rate in SUPPORTED_FRAME_RATES)


def resolve_frame_rate(custom_value: float | str | None = None) -> float:
    if custom_value is not None:
        return normalize_frame_rate(custom_value)
    env_value = os.getenv("TC2SRT_FPS")
    if env_value:
        return normalize_frame_rate(env_value)
    return DEFAULT_FRAME_RATE


def normalize_encoding(value: str) -> str:
    encoding = value.strip().lower()
    if not encoding:
        raise ValueError("Encoding must not be empty.")
    return encoding


def resolve_encoding(custom_value: str | None = None) -> str:
    if custom_value is not None:
        return normalize_encoding(custom_value)
    return normalize_encoding(os.getenv("TC2SRT_ENCODING") or DEFAULT_ENCODING)


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Allowed: {', '.join(SUPPORTED_LOG_LEVELS)}"
        )
    return level


def resolve_log_level(custom_value: str | None = None) -> str:
    if custom_value is not None:
        return normalize_log_level(custom_value)
    return normalize_log_level(os.getenv("TC2SRT_LOG_LEVEL") or DEFAULT_LOG_LEVEL)


def build_app_config(
    *,
    fps: float | str | None = None,
    encoding: str | None = None,
    log_level: str | None = None,
) -> AppConfig:
    return AppConfig(
        fps=resolve_frame_rate(fps),
        encoding=resolve_encoding(encoding),
        log_level=resolve_log_level(log_level),
    )
