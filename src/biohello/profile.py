"""
Codon extension profiles (YAML → ordered overrides).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple

try:  # pragma: no cover - optional dependency
    import yaml
except Exception:  # pragma: no cover
    yaml = None

from .codon import Override

PROFILE_KIND = "biohello.codon.extension.v1"
_PATTERN = re.compile(r"[acgtnx]{3}")


class ProfileError(ValueError):
    """Raised when an extension profile is invalid."""


def _ensure_yaml_available() -> None:
    if yaml is None:
        raise ProfileError("PyYAML is required for extension profiles. Install it with 'pip install pyyaml'.")


@dataclass(frozen=True)
class ExtensionProfile:
    name: str
    table_id: Optional[int]
    overrides: Tuple[Override, ...]


def _parse_override(index: int, entry: Any) -> Override:
    if not isinstance(entry, dict):
        raise ProfileError(f"Override #{index} must be a mapping with 'pattern' and 'symbol'.")
    pattern = str(entry.get("pattern", "")).strip().lower()
    symbol = str(entry.get("symbol", "")).strip()
    if not _PATTERN.fullmatch(pattern):
        raise ProfileError(f"Override #{index} has an invalid pattern {pattern!r}; expected 3 of a/c/g/t/n/x.")
    if len(symbol) != 1:
        raise ProfileError(f"Override #{index} symbol must be a single character, got {symbol!r}.")
    return Override(pattern, symbol.upper())


def load_extension_profile(path: Path) -> ExtensionProfile:
    _ensure_yaml_available()
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise ProfileError(f"Extension profile '{cfg_path}' not found.")
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ProfileError(f"Extension profile '{cfg_path}' is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ProfileError("Extension profile must be a YAML mapping.")
    kind = str(data.get("kind", "")).strip()
    if kind != PROFILE_KIND:
        raise ProfileError(f"Unknown profile kind {kind!r}. Supported kind: '{PROFILE_KIND}'.")
    table = data.get("table")
    try:
        table_id = int(table) if table is not None else None
    except (TypeError, ValueError) as exc:
        raise ProfileError(f"Profile 'table' must be an integer, got {table!r}.") from exc
    entries = data.get("overrides")
    if not isinstance(entries, list) or not entries:
        raise ProfileError("Extension profile requires a non-empty 'overrides' list.")
    overrides: List[Override] = [_parse_override(index, entry) for index, entry in enumerate(entries, start=1)]
    name = str(data.get("name") or cfg_path.stem)
    return ExtensionProfile(name=name, table_id=table_id, overrides=tuple(overrides))


__all__ = ["PROFILE_KIND", "ExtensionProfile", "ProfileError", "load_extension_profile"]
