"""Normalization of free text into the 27-symbol message alphabet."""
from __future__ import annotations

import re

from .codon import SEPARATOR

_NON_LETTERS = re.compile(r"[^A-Z]+")
_WHITESPACE = re.compile(r"\s+")


def normalize(raw: str) -> str:
    """Upper-case ``raw`` and collapse every non-letter run into one ``*``.

    Leading and trailing runs are dropped, so ``normalize`` is idempotent:

    >>> normalize("BioRuby is fun!")
    'BIORUBY*IS*FUN'
    """

    spaced = _NON_LETTERS.sub(" ", raw.upper()).strip()
    return spaced.replace(" ", SEPARATOR)


def clean_nucleotides(raw: str) -> str:
    """Lower-case DNA/RNA text with whitespace removed and ``u`` read as ``t``."""
    return _WHITESPACE.sub("", raw).lower().replace("u", "t")


__all__ = ["normalize", "clean_nucleotides"]
