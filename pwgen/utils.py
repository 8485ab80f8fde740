import os
from typing import Optional

from .errors import AttemptsExhaustedError, EmptyAlphabetError
from .password import MAX_ATTEMPTS

DEFAULT_LENGTH = 12


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if not raw: return None
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"{name} must be an integer, got {raw!r}.")


def resolve_length(cli_value: Optional[int]) -> int:
    if cli_value is not None: return cli_value
    env = _env_int("PWGEN_LENGTH")
    return env if env is not None else DEFAULT_LENGTH


def resolve_max_attempts(cli_value: Optional[int]) -> int:
    if cli_value is not None: return cli_value
    env = _env_int("PWGEN_MAX_ATTEMPTS")
    return env if env is not None else MAX_ATTEMPTS


def describe_error(exc) -> str:
    if isinstance(exc, EmptyAlphabetError):
        return "Error: No characters available with current settings"
    if isinstance(exc, AttemptsExhaustedError):
        return ("Error: Could not generate password meeting all criteria "
                f"in {exc.attempts} attempts. Try relaxing some requirements.")
    return f"Error: {exc}"
