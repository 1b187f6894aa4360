"""Encode messages as nucleotide triplets and decode them back."""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from .codon import CodonTable, build_codon_table
from .text import clean_nucleotides

LOGGER = logging.getLogger(__name__)


class UnknownSymbolError(KeyError):
    """Raised when a message symbol has no triplet in the codon table."""

    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(symbol)
        self.symbol = symbol
        self.position = position

    def __str__(self) -> str:
        return f"Symbol {self.symbol!r} at position {self.position} has no triplet in the codon table."


def iter_triplets(sequence: str) -> Iterator[str]:
    """Yield consecutive non-overlapping triplets; a partial tail is skipped."""
    for start in range(0, len(sequence) - len(sequence) % 3, 3):
        yield sequence[start : start + 3]


def encode(message: str, table: Optional[CodonTable] = None) -> str:
    """Concatenate the first listed triplet of every symbol in ``message``.

    ``message`` must already be normalized. Symbols that decode from several
    triplets always re-encode to the first one, so ``encode(decode(dna))``
    can differ from ``dna``.

    ``X`` has no concrete triplet and encodes to the wildcard ``nnn``. It is
    the only symbol whose triplet is not pure ``acgt``.
    """

    table = table or build_codon_table()
    triplets = []
    for position, symbol in enumerate(message):
        choices = table.triplets_for(symbol)
        if not choices:
            raise UnknownSymbolError(symbol, position)
        triplets.append(choices[0])
    return "".join(triplets)


def decode(sequence: str, table: Optional[CodonTable] = None) -> str:
    """Translate nucleotide text back into message symbols.

    Input is case-insensitive and whitespace is ignored. Triplets that do not
    resolve decode to ``.``; a trailing partial triplet is dropped.
    """

    table = table or build_codon_table()
    cleaned = clean_nucleotides(sequence)
    remainder = len(cleaned) % 3
    if remainder:
        LOGGER.debug("decode dropping %d trailing base(s) of %d", remainder, len(cleaned))
    return "".join(table.symbol_for(triplet) for triplet in iter_triplets(cleaned))


__all__ = ["UnknownSymbolError", "encode", "decode", "iter_triplets"]
