import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class EdgarConfig:
    """Runtime settings for talking to SEC EDGAR."""

    user_agent: str
    rate_limit_interval: float = 0.1
    timeout: float = 30.0
    log_level: str = "INFO"


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'.")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got '{raw}'.")
    return value


def _read_log_level(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got '{level}'.")
    return level


def initialize_config() -> EdgarConfig:
    """Initialize the SEC EDGAR configuration"""
    sec_edgar_user_agent = os.getenv("SEC_EDGAR_USER_AGENT")
    if not sec_edgar_user_agent:
        raise ValueError("SEC_EDGAR_USER_AGENT environment variable is not set.")

    return EdgarConfig(
        user_agent=sec_edgar_user_agent,
        rate_limit_interval=_read_float("SEC_EDGAR_RATE_LIMIT_MS", 100) / 1000.0,
        timeout=_read_float("SEC_EDGAR_TIMEOUT", 30.0),
        log_level=_read_log_level("SEC_EDGAR_LOG_LEVEL", "INFO"),
    )
