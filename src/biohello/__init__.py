"""biohello core package."""

from importlib import metadata

from . import api, codon, render, standard, text, transcode
from .codon import (
    ALPHABET,
    DEFAULT_OVERRIDES,
    CodonTable,
    CodonTableError,
    Override,
    build_codon_table,
)
from .render import print_helix, render_helix
from .text import normalize
from .transcode import UnknownSymbolError, decode, encode

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("biohello")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "api",
    "codon",
    "render",
    "standard",
    "text",
    "transcode",
    "ALPHABET",
    "DEFAULT_OVERRIDES",
    "CodonTable",
    "CodonTableError",
    "Override",
    "UnknownSymbolError",
    "build_codon_table",
    "normalize",
    "encode",
    "decode",
    "render_helix",
    "print_helix",
    "__version__",
]
