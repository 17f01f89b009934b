"""Configuration defaults and .env loading.

WHY: The wrap column, I/O chunk sizes and log level are operator-tunable
values. Keeping them as module-level constants in one place makes them
easy to find and override without touching codec logic.

HOW: python-dotenv loads the .env file on import. Each default is read
from the environment through a small validating helper so a bad value
fails at startup with a message naming the variable.

RULES:
- BASENC_WRAP_COLUMN: non-negative int, 0 disables wrapping (default 76)
- BASENC_ENCODE_CHUNK_SIZE: positive multiple of 60 (default 30720)
- BASENC_DECODE_CHUNK_SIZE: positive multiple of 40 (default 40960)
- BASENC_LOG_LEVEL: standard logging level name (default WARNING)
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the tool is run from)
load_dotenv()

# Encode chunks must hold whole groups for 3-, 4- and 5-byte groups,
# decode chunks whole groups for 2-, 4-, 5- and 8-symbol groups.
ENCODE_CHUNK_QUANTUM = 60
DECODE_CHUNK_QUANTUM = 40


def _int_from_env(name: str, default: int, minimum: int = 0, quantum: int = 1) -> int:
    """Read an integer setting from the environment.

    RULES:
    - Missing or blank variables fall back to ``default``
    - Values below ``minimum`` or not a multiple of ``quantum`` raise ValueError
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, raw)) from None
    if value < minimum:
        raise ValueError("{} must be at least {}, got {}".format(name, minimum, value))
    if value % quantum:
        raise ValueError("{} must be a multiple of {}, got {}".format(name, quantum, value))
    return value


DEFAULT_WRAP_COLUMN = _int_from_env("BASENC_WRAP_COLUMN", 76)
"""Symbols per output line when encoding; 0 means no wrapping."""

ENCODE_CHUNK_SIZE = _int_from_env(
    "BASENC_ENCODE_CHUNK_SIZE", 1024 * 3 * 10, minimum=1, quantum=ENCODE_CHUNK_QUANTUM,
)
"""Bytes read from the source per encode step."""

DECODE_CHUNK_SIZE = _int_from_env(
    "BASENC_DECODE_CHUNK_SIZE", 1024 * 5 * 8, minimum=1, quantum=DECODE_CHUNK_QUANTUM,
)
"""Encoded bytes read from the source per decode step."""

LOG_LEVEL = os.getenv("BASENC_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
if LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
    raise ValueError("BASENC_LOG_LEVEL must be a logging level name, got {!r}".format(LOG_LEVEL))
