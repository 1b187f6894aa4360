"""Standard NCBI codon tables and base complements, backed by Biopython."""
from __future__ import annotations

from itertools import product
from typing import Dict, Tuple

from Bio.Data import CodonTable
from Bio.Seq import Seq

NUCLEOTIDES = "tcag"
WILDCARD = "n"
STOP_SYMBOL = "*"

# NCBI listing order: t, c, a, g at every position.
TRIPLETS: Tuple[str, ...] = tuple("".join(bases) for bases in product(NUCLEOTIDES, repeat=3))


class UnknownTableError(LookupError):
    """Raised when Biopython has no codon table for the requested id."""

    def __init__(self, table_id: object) -> None:
        super().__init__(f"Unknown NCBI codon table id {table_id!r}.")
        self.table_id = table_id


def standard_forward_table(table_id: int) -> Dict[str, str]:
    """Return ``triplet -> amino-acid symbol`` for all 64 DNA triplets.

    Stop codons map to ``*``. Keys are lower case and ordered like ``TRIPLETS``.
    """

    try:
        table = CodonTable.unambiguous_dna_by_id[table_id]
    except (KeyError, TypeError) as exc:
        raise UnknownTableError(table_id) from exc
    lookup = {codon.lower(): amino for codon, amino in table.forward_table.items()}
    for codon in table.stop_codons:
        lookup[codon.lower()] = STOP_SYMBOL
    missing = [triplet for triplet in TRIPLETS if triplet not in lookup]
    if missing:
        raise UnknownTableError(table_id)
    return {triplet: lookup[triplet] for triplet in TRIPLETS}


def complement(bases: str) -> str:
    """Watson-Crick complement of ``bases``; ``n`` stays ``n`` and case is kept."""
    return str(Seq(bases).complement())


__all__ = [
    "NUCLEOTIDES",
    "WILDCARD",
    "STOP_SYMBOL",
    "TRIPLETS",
    "UnknownTableError",
    "standard_forward_table",
    "complement",
]
