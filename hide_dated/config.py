from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _getenv_int(name: str, default: int) -> int:
    v = os.getenv(name, str(default)).strip()
    try:
        return int(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be an integer; got {v!r}") from err


def _getenv_float(name: str, default: float) -> float:
    v = os.getenv(name, str(default)).strip()
    try:
        return float(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be a number; got {v!r}") from err


def _getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip()


def _getenv_bool(name: str, default: bool) -> bool:
    """
    Read a loosely-typed boolean from the environment.

    Treats "1", "true", "yes", "on" (case-insensitive) as True;
    "0", "false", "no", "off", "" as False. If unset, returns default.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off", ""}:
        return False
    return True


# Load .env from project root if present
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env", override=False)

BOT_NAME = "HideDatedTitles"
DEFAULT_USER_AGENT = f"{BOT_NAME}/0.1 (+https://github.com/hide-dated-titles)"

# -------------------------------
# Candidate discovery / page suppression
# -------------------------------
CANDIDATE_MIN_LENGTH: int = _getenv_int("HIDE_DATED_MIN_LENGTH", 6)
CANDIDATE_MAX_LENGTH: int = _getenv_int("HIDE_DATED_MAX_LENGTH", 120)
# Listings only; a single item's own page keeps its dated content
DETAIL_PATH_MARKER: str = _getenv_str("HIDE_DATED_DETAIL_PATH_MARKER", "/items/")
PROCESSED_ATTR: str = _getenv_str("HIDE_DATED_MARKER_ATTR", "data-hide-dated-processed")

# -------------------------------
# Fetch (CLI only)
# -------------------------------
FETCH_USER_AGENT: str = _getenv_str("HIDE_DATED_FETCH_USER_AGENT", DEFAULT_USER_AGENT)
FETCH_TIMEOUT_S: float = _getenv_float("HIDE_DATED_FETCH_TIMEOUT_S", 10.0)
FETCH_CONNECT_TIMEOUT_S: float = _getenv_float("HIDE_DATED_FETCH_CONNECT_TIMEOUT_S", 5.0)
FETCH_MAX_RETRIES: int = _getenv_int("HIDE_DATED_FETCH_MAX_RETRIES", 2)
FETCH_RETRY_BASE_S: float = _getenv_float("HIDE_DATED_FETCH_RETRY_BASE_S", 0.5)
FETCH_FOLLOW_REDIRECTS: bool = _getenv_bool("HIDE_DATED_FETCH_FOLLOW_REDIRECTS", True)

LOG_LEVEL: str = _getenv_str("HIDE_DATED_LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class ScanConfig:
    min_length: int = CANDIDATE_MIN_LENGTH
    max_length: int = CANDIDATE_MAX_LENGTH
    detail_path_marker: str = DETAIL_PATH_MARKER
    processed_attr: str = PROCESSED_ATTR

    def __post_init__(self) -> None:
        if self.min_length < 0 or self.max_length < self.min_length:
            raise ValueError(
                f"candidate length bounds must satisfy 0 <= min <= max; "
                f"got min={self.min_length} max={self.max_length}"
            )
        if not self.processed_attr:
            raise ValueError("processed_attr must be a non-empty attribute name")


@dataclass(frozen=True)
class FetchConfig:
    user_agent: str
    timeout_s: float
    connect_timeout_s: float
    max_retries: int
    retry_base_s: float
    follow_redirects: bool


@dataclass(frozen=True)
class AppConfig:
    scan: ScanConfig
    fetch: FetchConfig
    log_level: str


def load_settings() -> AppConfig:
    """Re-read the environment and build a structured config."""
    scan = ScanConfig(
        min_length=_getenv_int("HIDE_DATED_MIN_LENGTH", 6),
        max_length=_getenv_int("HIDE_DATED_MAX_LENGTH", 120),
        detail_path_marker=_getenv_str("HIDE_DATED_DETAIL_PATH_MARKER", "/items/"),
        processed_attr=_getenv_str("HIDE_DATED_MARKER_ATTR", "data-hide-dated-processed"),
    )
    fetch = FetchConfig(
        user_agent=_getenv_str("HIDE_DATED_FETCH_USER_AGENT", DEFAULT_USER_AGENT),
        timeout_s=_getenv_float("HIDE_DATED_FETCH_TIMEOUT_S", 10.0),
        connect_timeout_s=_getenv_float("HIDE_DATED_FETCH_CONNECT_TIMEOUT_S", 5.0),
        max_retries=_getenv_int("HIDE_DATED_FETCH_MAX_RETRIES", 2),
        retry_base_s=_getenv_float("HIDE_DATED_FETCH_RETRY_BASE_S", 0.5),
        follow_redirects=_getenv_bool("HIDE_DATED_FETCH_FOLLOW_REDIRECTS", True),
    )
    return AppConfig(
        scan=scan,
        fetch=fetch,
        log_level=_getenv_str("HIDE_DATED_LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()

__all__ = [
    "AppConfig",
    "FetchConfig",
    "ScanConfig",
    "load_settings",
    "settings",
]
