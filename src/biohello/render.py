"""ASCII double-helix rendering of nucleotide sequences."""
from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from .standard import WILDCARD, complement

WINDOW = 16
HALF_TURN = WINDOW // 2

# (leading spaces, dash count) for each row of a half turn.
HELIX_GEOMETRY: Tuple[Tuple[int, int], ...] = (
    (5, 0),
    (4, 2),
    (3, 3),
    (2, 4),
    (1, 4),
    (0, 3),
    (0, 2),
    (1, 0),
)


def _pad(sequence: str) -> str:
    if len(sequence) < WINDOW:
        return sequence + WILDCARD * (WINDOW - len(sequence))
    return sequence


def render_helix(sequence: str, geometry: Sequence[Tuple[int, int]] = HELIX_GEOMETRY) -> List[str]:
    """Return the helix rows for ``sequence``, one base pair per row.

    The sequence is padded with ``n`` to at least one window and drawn in
    complete 16-base windows: the first half turn prints ``base--complement``,
    the second half flips the strands and walks the geometry backwards.

    Bases after the last complete window are not drawn: 30 bases give 16
    rows, not 32. Lengths up to 16 and multiples of 16 always get
    ceil(len/16) * 16 rows.
    """

    if len(geometry) != HALF_TURN:
        raise ValueError(f"Helix geometry needs {HALF_TURN} rows, got {len(geometry)}.")
    padded = _pad(sequence)
    length = len(padded)
    rows: List[str] = []
    count = 0
    for start in range(0, length - WINDOW + 1, WINDOW):
        window = padded[start : start + WINDOW]
        paired = complement(window)
        for offset, (spaces, dashes) in enumerate(geometry):
            count += 1
            if count > length:
                break
            rows.append(" " * spaces + window[offset] + "-" * dashes + paired[offset])
        for offset, (spaces, dashes) in enumerate(reversed(geometry), start=HALF_TURN):
            count += 1
            if count > length:
                break
            rows.append(" " * spaces + paired[offset] + "-" * dashes + window[offset])
    return rows


def print_helix(sequence: str, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    for row in render_helix(sequence):
        print(row, file=out)


__all__ = ["HELIX_GEOMETRY", "WINDOW", "render_helix", "print_helix"]
