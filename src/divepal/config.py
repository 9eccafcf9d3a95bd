"""Environment-driven settings. Call load_dotenv() before Settings.from_env()."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

DATA_SOURCES: tuple[str, ...] = ("static", "remote")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


def default_log_dir() -> Path:
    return Path.home() / ".local" / "share" / "DivePal" / "logs"


def _to_float(value: str | None, default: float) -> float:
    try:
        parsed = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class Settings:
    data_source: str = "static"  # One of DATA_SOURCES
    supabase_url: str = ""
    supabase_key: str = ""
    remote_table: str = "dive_sites"
    http_timeout: float = 10.0  # Seconds
    log_dir: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from the environment. Invalid values fall back to defaults."""
        env = os.environ if environ is None else environ
        data_source = env.get("DIVEPAL_DATA_SOURCE", "static").strip().lower()
        log_level = env.get("DIVEPAL_LOG_LEVEL", "INFO").strip().upper()
        return cls(
            data_source=data_source if data_source in DATA_SOURCES else "static",
            supabase_url=env.get("SUPABASE_URL", "").strip(),
            supabase_key=env.get("SUPABASE_KEY", "").strip(),
            remote_table=env.get("DIVEPAL_REMOTE_TABLE", "").strip() or "dive_sites",
            http_timeout=_to_float(env.get("DIVEPAL_HTTP_TIMEOUT"), 10.0),
            log_dir=env.get("DIVEPAL_LOG_DIR", "").strip() or str(default_log_dir()),
            log_level=log_level if log_level in LOG_LEVELS else "INFO",
        )

    def with_remote(self, enabled: bool, url: str, key: str) -> "Settings":
        """Per-session override from the data-source panel."""
        return replace(
            self,
            data_source="remote" if enabled else "static",
            supabase_url=url.strip(),
            supabase_key=key.strip(),
        )
