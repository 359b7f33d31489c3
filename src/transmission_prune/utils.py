#!/usr/bin/env python3
"""Utility functions for Transmission prune."""

import logging
import os
import re
from typing import Optional

logger = logging.getLogger(__name__)


_BOOL_TRUE = frozenset(('true', '1', 'yes', 'on'))
_BOOL_FALSE = frozenset(('false', '0', 'no', 'off'))

# Go time.Duration units, in seconds
_DURATION_UNITS = {
    'ns': 1e-9,
    'us': 1e-6,
    'µs': 1e-6,
    'ms': 1e-3,
    's': 1.0,
    'm': 60.0,
    'h': 3600.0,
}
_DURATION_PART = re.compile(r'(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)')
_BARE_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")
# Credentials end at the last @ before the path, as urlsplit reads them
_URL_PASSWORD = re.compile(r"(://[^:/@]*:)[^/?#]*@")


def parse_bool(env_var: str, default: bool = False) -> bool:
    """
    Parse boolean environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        Parsed boolean value
    """
    raw = os.environ.get(env_var)
    if raw is None:
        return default
    lower = raw.strip().lower()
    if lower not in _BOOL_TRUE and lower not in _BOOL_FALSE:
        logger.warning(f"{env_var}='{raw}' is not a recognized boolean, treating as False")
    return lower in _BOOL_TRUE


def parse_int(env_var: str, default: int, min_val: Optional[int] = None) -> int:
    """
    Parse integer environment variable with optional minimum value.

    Args:
        env_var: Environment variable name
        default: Default value if not set
        min_val: Minimum allowed value

    Returns:
        Parsed integer value
    """
    try:
        value = int(os.environ.get(env_var, str(default)))
        if min_val is not None and value < min_val:
            logger.warning(f"{env_var}={value} is below minimum {min_val}, using default {default}")
            return default
        return value
    except (ValueError, TypeError):
        logger.warning(f"Invalid integer value for {env_var}, using default {default}")
        return default


def parse_str(env_var: str, default: str = "") -> str:
    """Parse string environment variable, treating blank values as unset."""
    raw = os.environ.get(env_var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def parse_duration(value: str) -> float:
    """
    Parse a Go-style duration string into seconds.

    Accepts sequences such as ``90s``, ``5m``, ``1h30m`` or ``1.5h``. A bare
    number is taken as seconds.

    Args:
        value: Duration string

    Returns:
        Duration in seconds

    Raises:
        ValueError: If the string is not a valid duration
    """
    text = value.strip()
    if not text:
        raise ValueError("empty duration")

    if _BARE_NUMBER.fullmatch(text):
        return float(text)

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration: {value!r}")
        number, unit = match.groups()
        total += float(number) * _DURATION_UNITS[unit]
        pos = match.end()
    return total


def parse_duration_env(env_var: str, default: str) -> float:
    """
    Parse a positive duration environment variable.

    Args:
        env_var: Environment variable name
        default: Default duration string if not set or invalid

    Returns:
        Duration in seconds
    """
    raw = parse_str(env_var, default)
    try:
        value = parse_duration(raw)
    except ValueError:
        logger.warning(f"Invalid duration value for {env_var}='{raw}', using default {default}")
        return parse_duration(default)
    if value <= 0:
        logger.warning(f"{env_var}='{raw}' is not positive, using default {default}")
        return parse_duration(default)
    return value


def format_duration(seconds: float) -> str:
    """Format seconds as a compact duration, e.g. ``1h30m0s``."""
    if seconds < 1:
        return f"{seconds * 1000:g}ms"

    whole = int(seconds)
    fraction = seconds - whole
    hours, rem = divmod(whole, 3600)
    minutes, secs = divmod(rem, 60)

    secs_str = f"{secs + fraction:g}s"
    if hours:
        return f"{hours}h{minutes}m{secs_str}"
    if minutes:
        return f"{minutes}m{secs_str}"
    return secs_str


def redact_url(url: str) -> str:
    """
    Replace the password in a URL with asterisks for logging.

    Args:
        url: URL that may carry ``user:password@`` credentials

    Returns:
        URL safe to log
    """
    return _URL_PASSWORD.sub(r"\1****@", url, count=1)


def truncate_name(name: str, max_length: int = 60) -> str:
    """
    Truncate a torrent name for display.

    Args:
        name: Torrent name to truncate
        max_length: Maximum length

    Returns:
        Truncated name with ellipsis if needed
    """
    if len(name) <= max_length:
        return name
    return name[:max_length - 3] + "..."
