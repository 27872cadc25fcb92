"""Decoding for the monitor `no_data_timeframe` option.

The API reports "no timeframe configured" as either `false` or `null`, and
an active timeframe as a number of minutes (occasionally quoted). Both
disabled spellings normalise to `0`.
"""

from __future__ import annotations

import json
import re

__all__ = [
    "MalformedTimeframe",
    "decode_timeframe_token",
    "decode_no_data_timeframe",
]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class MalformedTimeframe(ValueError):
    """Raised when a timeframe is not `false`, `null` or an integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"malformed no_data_timeframe: {raw!r}")
        self.raw = raw


def _parse_int(text: str, raw: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise MalformedTimeframe(raw)
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise MalformedTimeframe(raw)
    return value


def decode_timeframe_token(raw: str | bytes) -> int:
    """Decode a raw JSON token into minutes.

    Args:
        raw: Token text exactly as it appeared on the wire, e.g. `false`,
            `null`, `30` or `"30"`.

    Returns:
        Minutes of missing data before alerting; `0` when disabled.

    Raises:
        MalformedTimeframe: If the token is anything else.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="backslashreplace")
    if raw in ("false", "null"):
        return 0
    text = raw
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        try:
            text = json.loads(raw)
        except ValueError:
            raise MalformedTimeframe(raw) from None
    return _parse_int(text, raw)


def decode_no_data_timeframe(value: object) -> int:
    """Decode an already-parsed JSON value into minutes.

    Accepts `False`, `None`, an `int` or a string holding an integer.
    """
    if value is False or value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        # True, floats and containers are not timeframes
        raise MalformedTimeframe(json.dumps(value))
    if isinstance(value, int):
        return _parse_int(str(value), str(value))
    return _parse_int(value, json.dumps(value))
