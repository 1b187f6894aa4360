"""Stable one-shot helpers for embedding biohello in other tools.

Without an explicit ``table`` every call builds its own default codon table,
so nothing is shared between calls::

    from biohello import api

    dna = api.encode("I love you")
    api.decode(dna)          # "I*LOVE*YOU"
    api.helix("I love you")  # list of helix rows
"""
from __future__ import annotations

from typing import List, Optional

from Bio.Seq import Seq

from . import render, transcode
from .codon import CodonTable, build_codon_table
from .config import resolve_table_id
from .text import clean_nucleotides, normalize


def default_table(table_id: Optional[int] = None) -> CodonTable:
    return build_codon_table(resolve_table_id(table_id))


def encode(text: str, table: Optional[CodonTable] = None) -> str:
    """Normalize free text and return its DNA encoding."""
    return transcode.encode(normalize(text), table or default_table())


def decode(dna: str, table: Optional[CodonTable] = None) -> str:
    return transcode.decode(dna, table or default_table())


def as_sequence(text_or_dna: str, table: Optional[CodonTable] = None, *, dna: bool = False) -> str:
    """Encode free text, or with ``dna=True`` return the nucleotide text cleaned but unchanged."""
    if dna:
        return clean_nucleotides(text_or_dna)
    return encode(text_or_dna, table)


def helix(text_or_dna: str, table: Optional[CodonTable] = None, *, dna: bool = False) -> List[str]:
    """Helix rows for the encoding of free text, or for DNA input with ``dna=True``."""
    return render.render_helix(as_sequence(text_or_dna, table, dna=dna))


def biopython_snippet(dna: str, table: CodonTable) -> List[str]:
    """Biopython one-liner translating ``dna`` with the plain NCBI table, and its output.

    The plain translation only agrees with the message for the 20 amino acids
    and ``*``; the extended letters show what Biopython makes of them.
    """

    translated = str(Seq(dna).translate(table=table.table_id))
    return [
        f"% python -c 'from Bio.Seq import Seq; print(Seq(\"{dna}\").translate(table={table.table_id}))'",
        f' ==> "{translated}"',
        f' biohello ==> "{transcode.decode(dna, table)}"',
    ]


def code_snippet(text_or_dna: str, table: Optional[CodonTable] = None, *, dna: bool = False) -> List[str]:
    table = table or default_table()
    return biopython_snippet(as_sequence(text_or_dna, table, dna=dna), table)


__all__ = ["default_table", "encode", "decode", "as_sequence", "helix", "biopython_snippet", "code_snippet"]
