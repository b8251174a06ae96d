import os
import re

from apc_progress.utils.logging_utils import log_error, log_info


TOKEN_ENV_VAR = "BEARER_TOKEN"
TOKEN_HINT = (
    "Run localStorage.getItem('account_access_token') in the browser console "
    "on apclassroom.collegeboard.org and paste the result."
)

_SURROUNDING_QUOTES = re.compile(r'^"|"$')


def _clean_token(raw: str) -> str:
    """Drop whitespace and one pair of surrounding double quotes left by copy-paste."""
    return _SURROUNDING_QUOTES.sub("", raw.strip())


def resolve_bearer_token() -> str:
    """
    Resolve the bearer token from ``BEARER_TOKEN`` or, failing that, an
    interactive prompt. Exits with status 1 when no token is given.
    """
    token = os.environ.get(TOKEN_ENV_VAR, "").strip()

    if not token:
        log_info(f"{TOKEN_ENV_VAR} is not set. {TOKEN_HINT}")
        token = _clean_token(input("Enter your AP Classroom bearer token:\n"))

    if not token:
        log_error(f"No {TOKEN_ENV_VAR} provided")
        raise SystemExit(1)
    return token
