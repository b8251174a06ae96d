from pathlib import Path
from typing import Any, Dict

from apc_progress.utils.logging_utils import log_warning


CONFIG_FILE = "config.yml"

DEFAULT_FYM_ENDPOINT = "https://apc-api-production.collegeboard.org/fym/graphql"
DEFAULT_UNITS_ENDPOINT = "https://apc-api-production.collegeboard.org/units/graphql"
DEFAULT_REQUEST_TIMEOUT = 30.0

_CONFIG_CACHE: Dict[str, Any] | None = None


def _parse_simple_yaml(path: Path) -> Dict[str, Any]:
    """
    Minimal YAML reader. Only supports one flat pair per line:

    key: value

    Values may be wrapped in single or double quotes. Blank lines and
    ``#`` comments are ignored.
    """
    result: Dict[str, Any] = {}
    with path.open("r", encoding="utf-8") as f:
        for raw_line in f:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if ":" not in line:
                continue
            key, value = line.split(":", 1)
            key = key.strip()
            value = value.strip()
            if not key:
                continue
            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            result[key] = value
    return result


def load_config() -> Dict[str, Any]:
    """
    Read ``config.yml`` from the current working directory and cache it.
    A missing or unreadable file yields an empty dict.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    try:
        cfg_path = Path.cwd() / CONFIG_FILE
        if not cfg_path.exists():
            _CONFIG_CACHE = {}
            return _CONFIG_CACHE

        _CONFIG_CACHE = _parse_simple_yaml(cfg_path)
        return _CONFIG_CACHE
    except Exception as exc:
        log_warning(f"Failed to load {CONFIG_FILE}, using defaults. Reason: {exc}")
        _CONFIG_CACHE = {}
        return _CONFIG_CACHE


def get_config_value(key: str, default: Any | None = None) -> Any:
    cfg = load_config()
    return cfg.get(key, default)


def get_fym_endpoint() -> str:
    """GraphQL endpoint of the progress ("fym") service."""
    return str(get_config_value("FYM_ENDPOINT", DEFAULT_FYM_ENDPOINT))


def get_units_endpoint() -> str:
    """GraphQL endpoint of the course-outline ("units") service."""
    return str(get_config_value("UNITS_ENDPOINT", DEFAULT_UNITS_ENDPOINT))


def get_request_timeout() -> float:
    """
    Per-request timeout in seconds. Invalid or non-positive values fall back
    to the default.
    """
    raw = get_config_value("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        log_warning(f"Invalid REQUEST_TIMEOUT {raw!r}, using {DEFAULT_REQUEST_TIMEOUT}s.")
        return DEFAULT_REQUEST_TIMEOUT
    if timeout <= 0:
        log_warning(f"REQUEST_TIMEOUT must be positive, using {DEFAULT_REQUEST_TIMEOUT}s.")
        return DEFAULT_REQUEST_TIMEOUT
    return timeout
