"""Derive and validate a computer name from a hardware serial number.

Serial layouts:
  C02XXXXXYYYY  legacy 12-char layout; the 5 chars after "C02" and the last 4 are kept
  anything else randomized modern serials; kept whole if they fit, else truncated
"""

from __future__ import annotations

import re

from .errors import InvalidCharacterError, NameTooLongError

NAME_RE = re.compile(r"[A-Za-z0-9-]+")

LEGACY_SERIAL_PREFIX = "C02"
LEGACY_SERIAL_LENGTH = 12


def is_legacy_serial(serial: str) -> bool:
    return len(serial) == LEGACY_SERIAL_LENGTH and serial.startswith(LEGACY_SERIAL_PREFIX)


def generate_name(serial: str, prefix: str, max_len: int) -> str:
    """
    Build the candidate name for `serial`.

    The legacy branch does not look at `max_len`; `validate_name` catches
    an overlong result. In the modern branch the fit check is a strict `<`,
    so a name of exactly `max_len` characters takes the truncation path
    (which produces the same string).
    """
    if is_legacy_serial(serial):
        return f"{prefix}-{serial[3:8]}-{serial[-4:]}"

    if len(prefix) + 1 + len(serial) < max_len:
        return f"{prefix}-{serial}"

    available = max(max_len - len(prefix) - 1, 0)
    return f"{prefix}-{serial[:available]}"


def validate_name(name: str, max_len: int) -> None:
    if NAME_RE.fullmatch(name) is None:
        raise InvalidCharacterError("Computer name contains invalid characters")
    if len(name) > max_len:
        raise NameTooLongError(f"Computer name exceeds maximum length of {max_len} characters")
