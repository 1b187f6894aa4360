"""biohello runtime configuration helpers."""

from __future__ import annotations

import logging
import os

from .codon import DEFAULT_TABLE_ID

_TABLE_ENV = "BIOHELLO_CODON_TABLE"
_LOG_LEVEL_ENV = "BIOHELLO_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"

LOGGER = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        LOGGER.warning("Ignoring %s=%r (expected an integer); using %s.", name, raw, default)
        return default


def resolve_table_id(preferred: int | None = None) -> int:
    """Resolve the codon table id requested by CLI/env."""

    table_id = preferred if preferred is not None else _env_int(_TABLE_ENV, DEFAULT_TABLE_ID)
    LOGGER.debug("resolve_table_id table=%s preferred=%s env=%s", table_id, preferred, os.getenv(_TABLE_ENV))
    return table_id


def resolve_log_level(preferred: str | None = None) -> int:
    name = (preferred or os.getenv(_LOG_LEVEL_ENV) or _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


__all__ = [
    "resolve_table_id",
    "resolve_log_level",
    "_TABLE_ENV",
    "_LOG_LEVEL_ENV",
]
