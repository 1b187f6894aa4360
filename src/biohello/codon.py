"""Codon table extended so that every letter A-Z and ``*`` has a triplet.

The standard NCBI table only covers 20 amino acids plus the stop symbol. The
remaining letters are assigned ad hoc (only checked against table 1):

* ``O`` pyrrolysine and ``U`` selenocysteine take two of the stop codons.
* ``B`` (Asx), ``J`` (Xle) and ``Z`` (Glx) take wildcard patterns.
* ``X`` (unknown) is the catch-all ``nnn``.
* ``xxx`` is a sentinel decoding to ``.``; it is never produced by encode.
"""
from __future__ import annotations

import logging
import string
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .standard import NUCLEOTIDES, TRIPLETS, WILDCARD, UnknownTableError, standard_forward_table

LOGGER = logging.getLogger(__name__)

SEPARATOR = "*"
UNKNOWN_SYMBOL = "."
ALPHABET = frozenset(string.ascii_uppercase + SEPARATOR)
DEFAULT_TABLE_ID = 1


class CodonTableError(RuntimeError):
    """Raised when an extended table leaves an alphabet symbol without a triplet."""


@dataclass(frozen=True)
class Override:
    """A single ``pattern -> symbol`` extension entry.

    ``n`` in the pattern matches any base. Patterns using other characters
    (the ``xxx`` sentinel) match no concrete triplet and only exist as a
    literal forward entry.
    """

    pattern: str
    symbol: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", self.pattern.lower())

    @property
    def specificity(self) -> int:
        return sum(1 for base in self.pattern if base in NUCLEOTIDES)

    @property
    def is_wildcard(self) -> bool:
        return WILDCARD in self.pattern

    def matches(self, triplet: str) -> bool:
        allowed = NUCLEOTIDES + WILDCARD
        if len(triplet) != 3 or any(base not in allowed for base in self.pattern + triplet):
            return False
        return all(p == WILDCARD or p == t for p, t in zip(self.pattern, triplet))

    def expand(self) -> List[str]:
        """Concrete triplets covered by the pattern, in ``TRIPLETS`` order."""
        return [triplet for triplet in TRIPLETS if self.matches(triplet)]


DEFAULT_OVERRIDES: Tuple[Override, ...] = (
    Override("tag", "O"),  # Pyl pyrrolysine
    Override("tga", "U"),  # Sec selenocysteine
    Override("nac", "B"),  # Asx [DN]
    Override("ctn", "J"),  # Xle [IL]
    Override("nag", "Z"),  # Glx [EQ]
    Override("nnn", "X"),  # Xaa unknown
    Override("xxx", UNKNOWN_SYMBOL),
)


@dataclass(frozen=True)
class CodonTable:
    """Bidirectional, read-only mapping between triplets and symbols."""

    table_id: int
    forward: Mapping[str, str]
    reverse: Mapping[str, Tuple[str, ...]]
    overrides: Tuple[Override, ...] = DEFAULT_OVERRIDES

    def symbol_for(self, triplet: str) -> str:
        """Resolve a triplet, falling back to the most specific matching pattern."""

        triplet = triplet.lower()
        symbol = self.forward.get(triplet)
        if symbol is not None:
            return symbol
        best: Optional[Override] = None
        for override in self.overrides:
            if not override.matches(triplet):
                continue
            if best is None or override.specificity >= best.specificity:
                best = override
        return best.symbol if best is not None else UNKNOWN_SYMBOL

    def triplets_for(self, symbol: str) -> Tuple[str, ...]:
        return self.reverse.get(symbol, ())

    def is_ambiguous(self, symbol: str) -> bool:
        """True when more than one triplet decodes to ``symbol``."""
        return len(self.triplets_for(symbol)) > 1


def _resolve(base: Mapping[str, str], overrides: Sequence[Override]) -> Dict[str, str]:
    # rank 0 = standard table; an override ranks by its number of fixed bases
    forward = dict(base)
    rank: Dict[str, Tuple[int, bool]] = {triplet: (0, False) for triplet in forward}
    for override in overrides:
        for triplet in override.expand():
            held, from_override = rank.get(triplet, (0, False))
            level = override.specificity
            if level > held or (level == held and from_override):
                forward[triplet] = override.symbol
                rank[triplet] = (level, True)
        if override.is_wildcard or override.pattern not in forward:
            forward[override.pattern] = override.symbol
    return forward


def _invert(forward: Mapping[str, str], overrides: Sequence[Override]) -> Dict[str, Tuple[str, ...]]:
    reverse: Dict[str, List[str]] = {}
    for triplet in TRIPLETS:
        reverse.setdefault(forward[triplet], []).append(triplet)
    for override in overrides:
        if override.pattern in TRIPLETS or override.symbol not in ALPHABET:
            continue
        if forward.get(override.pattern) != override.symbol:
            continue
        listed = reverse.setdefault(override.symbol, [])
        if override.pattern not in listed:
            listed.append(override.pattern)
    missing = sorted(symbol for symbol in ALPHABET if not reverse.get(symbol))
    if missing:
        raise CodonTableError(f"Extended codon table leaves symbols without a triplet: {''.join(missing)}")
    return {symbol: tuple(triplets) for symbol, triplets in reverse.items() if symbol in ALPHABET}


def extend_table(
    table_id: int,
    base: Mapping[str, str],
    overrides: Iterable[Override] = DEFAULT_OVERRIDES,
) -> CodonTable:
    """Apply ``overrides`` to a standard forward table and build the reverse map."""

    ordered = tuple(overrides)
    forward = _resolve(base, ordered)
    reverse = _invert(forward, ordered)
    LOGGER.debug(
        "extend_table table=%s overrides=%d ambiguous=%s",
        table_id,
        len(ordered),
        ",".join(sorted(symbol for symbol, triplets in reverse.items() if len(triplets) > 1)),
    )
    return CodonTable(table_id=table_id, forward=forward, reverse=reverse, overrides=ordered)


_LAST_BUILT: Dict[str, CodonTable] = {}
_LAST_LOCK = threading.Lock()


def last_built_table() -> Optional[CodonTable]:
    with _LAST_LOCK:
        return _LAST_BUILT.get("table")


def build_codon_table(
    table_id: int = DEFAULT_TABLE_ID,
    overrides: Optional[Iterable[Override]] = None,
) -> CodonTable:
    """Build the extended table for an NCBI table id.

    An unknown id is not an error: the previously built table is returned if
    it was built from the same overrides, otherwise table 1 is extended with
    the requested ones. Only a broken fallback or an extension that strips a
    symbol of every triplet raises.
    """

    ordered = DEFAULT_OVERRIDES if overrides is None else tuple(overrides)
    try:
        base = standard_forward_table(table_id)
    except UnknownTableError:
        previous = last_built_table()
        if previous is not None and previous.overrides == ordered:
            LOGGER.warning(
                "Codon table %r is not available; reusing previously built table %s.",
                table_id,
                previous.table_id,
            )
            return previous
        LOGGER.warning(
            "Codon table %r is not available; falling back to table %s.", table_id, DEFAULT_TABLE_ID
        )
        table_id = DEFAULT_TABLE_ID
        base = standard_forward_table(DEFAULT_TABLE_ID)
    table = extend_table(table_id, base, ordered)
    with _LAST_LOCK:
        _LAST_BUILT["table"] = table
    return table


def reset_table_cache() -> None:
    with _LAST_LOCK:
        _LAST_BUILT.clear()


__all__ = [
    "ALPHABET",
    "SEPARATOR",
    "UNKNOWN_SYMBOL",
    "DEFAULT_TABLE_ID",
    "DEFAULT_OVERRIDES",
    "CodonTable",
    "CodonTableError",
    "Override",
    "build_codon_table",
    "extend_table",
    "last_built_table",
    "reset_table_cache",
]
