"""biohello CLI: encode messages as DNA, decode them, and draw helices."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Sequence

from . import api, render, transcode
from .codon import CodonTable, CodonTableError, build_codon_table
from .config import resolve_log_level, resolve_table_id
from .profile import load_extension_profile
from .text import normalize
from . import __version__ as BIOHELLO_VERSION

try:  # optional viz imports (matplotlib)
    from .viz import render_postcard

    VIZ_AVAILABLE = True
except ImportError:  # pragma: no cover - viz extra not installed
    render_postcard = None  # type: ignore
    VIZ_AVAILABLE = False

LOGGER = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _iter_inputs(text: str | None, path: Path | None) -> Iterable[str]:
    """Inline text, then a file, then stdin; files and stdin are read per line."""

    if text and path:
        raise ValueError("Provide either inline text or --input path, not both.")
    if text:
        yield text
        return
    if path:
        if not path.exists():
            raise ValueError(f"Input file '{path}' not found.")
        lines = _read_text(path).splitlines()
    else:
        lines = sys.stdin.read().splitlines()
    for line in lines:
        if line.strip():
            yield line


def _table_from_args(args: argparse.Namespace) -> CodonTable:
    overrides = None
    table_id = args.table
    if args.profile:
        profile = load_extension_profile(args.profile)
        overrides = profile.overrides
        if table_id is None:
            table_id = profile.table_id
        LOGGER.info("Loaded extension profile %s (%d overrides)", profile.name, len(overrides))
    return build_codon_table(resolve_table_id(table_id), overrides)


def _run_per_input(args: argparse.Namespace, handler: Callable[[str, CodonTable], None]) -> None:
    table = _table_from_args(args)
    for raw in _iter_inputs(args.text, args.input):
        handler(raw, table)


def command_encode(args: argparse.Namespace) -> None:
    def handle(raw: str, table: CodonTable) -> None:
        print(transcode.encode(normalize(raw), table))

    _run_per_input(args, handle)


def command_decode(args: argparse.Namespace) -> None:
    def handle(raw: str, table: CodonTable) -> None:
        print(transcode.decode(raw, table))

    _run_per_input(args, handle)


def command_helix(args: argparse.Namespace) -> None:
    def handle(raw: str, table: CodonTable) -> None:
        render.print_helix(api.as_sequence(raw, table, dna=args.dna))

    _run_per_input(args, handle)


def command_code(args: argparse.Namespace) -> None:
    def handle(raw: str, table: CodonTable) -> None:
        for line in api.code_snippet(raw, table, dna=args.dna):
            print(line)

    _run_per_input(args, handle)


def command_postcard(args: argparse.Namespace) -> None:
    if not VIZ_AVAILABLE:
        raise SystemExit("Postcards require matplotlib. Install with 'pip install \"biohello[viz]\"'.")
    table = _table_from_args(args)
    raw = " ".join(_iter_inputs(args.text, args.input))
    dna = api.as_sequence(raw, table, dna=args.dna)
    message = transcode.decode(dna, table)
    render_postcard(dna, message, save=str(args.out), save_viz_spec=str(args.viz_spec) if args.viz_spec else None)
    print(f"Postcard saved to {args.out}")


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", nargs="?", help="Inline message or DNA. If omitted, --input or stdin is read.")
    parser.add_argument("--input", type=Path, help="Text file; every non-empty line is processed.")
    parser.add_argument(
        "--table",
        type=int,
        help="NCBI codon table id (default: $BIOHELLO_CODON_TABLE or 1; unknown ids fall back).",
    )
    parser.add_argument("--profile", type=Path, help="YAML extension profile replacing the default overrides.")


def _add_dna_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dna",
        action="store_true",
        help="Treat the input as a DNA sequence instead of a message to encode.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Encode messages as DNA and back, with ASCII helices.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {BIOHELLO_VERSION}")
    parser.add_argument("--log-level", help="Logging level (default: $BIOHELLO_LOG_LEVEL or WARNING).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_cmd = subparsers.add_parser("encode", help="Encode text as a DNA sequence.")
    _add_common(encode_cmd)
    encode_cmd.set_defaults(func=command_encode)

    decode_cmd = subparsers.add_parser("decode", help="Decode a DNA encoded message.")
    _add_common(decode_cmd)
    decode_cmd.set_defaults(func=command_decode)

    helix_cmd = subparsers.add_parser("helix", help="Show a DNA double strand helix in ASCII art.")
    _add_common(helix_cmd)
    _add_dna_flag(helix_cmd)
    helix_cmd.set_defaults(func=command_helix)

    code_cmd = subparsers.add_parser("code", help="Show the Biopython code snippet translating the DNA.")
    _add_common(code_cmd)
    _add_dna_flag(code_cmd)
    code_cmd.set_defaults(func=command_code)

    postcard_cmd = subparsers.add_parser("postcard", help="Render the encoded message as a PNG postcard.")
    _add_common(postcard_cmd)
    _add_dna_flag(postcard_cmd)
    postcard_cmd.add_argument("--out", type=Path, required=True, help="PNG output path.")
    postcard_cmd.add_argument("--viz-spec", type=Path, help="Optional viz-spec JSON output path.")
    postcard_cmd.set_defaults(func=command_postcard)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        logging.basicConfig(level=resolve_log_level(args.log_level), format="%(levelname)s %(name)s: %(message)s")
        args.func(args)
    except (ValueError, CodonTableError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - manual invocation path
    main()
