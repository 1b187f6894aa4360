import os
import subprocess
import sys
from pathlib import Path

from biohello.profile import PROFILE_KIND
from biohello.render import render_helix

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"


def run_cli(*args: str, check: bool = True, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH", "")
    path_entries = [str(SRC)]
    if existing:
        path_entries.append(existing)
    env["PYTHONPATH"] = os.pathsep.join(path_entries)
    env.pop("BIOHELLO_CODON_TABLE", None)
    result = subprocess.run(
        [sys.executable, "-m", "biohello.cli", *args],
        cwd=ROOT,
        capture_output=True,
        text=True,
        env=env,
        input=stdin if stdin is not None else "",
    )
    if check and result.returncode != 0:
        raise AssertionError(f"Command failed: {result.stderr}")
    return result


def test_cli_encode_inline():
    result = run_cli("encode", "I love you")
    assert result.stdout.strip() == "atttaattataggttgaataatattagtga"


def test_cli_decode_inline():
    result = run_cli("decode", "nacatatagagatganactattaaataagttaattttgaaat")
    assert result.stdout.strip() == "BIORUBY*IS*FUN"


def test_cli_helix_text():
    result = run_cli("helix", "I love you")
    lines = result.stdout.splitlines()
    assert len(lines) == 16
    assert lines[0] == "     at"


def test_cli_code_snippet():
    result = run_cli("code", "A happy new year")
    assert "from Bio.Seq import Seq" in result.stdout
    assert 'biohello ==> "A*HAPPY*NEW*YEAR"' in result.stdout


def test_cli_reads_input_file_per_line(tmp_path: Path):
    path = tmp_path / "messages.txt"
    path.write_text("hello\n\nworld\n", encoding="utf-8")
    result = run_cli("encode", "--input", str(path))
    lines = result.stdout.splitlines()
    assert len(lines) == 2
    decoded = run_cli("decode", "--input", str(path))
    assert decoded.returncode == 0


def test_cli_reads_stdin():
    result = run_cli("decode", stdin="atgtgg\ntaa\n")
    assert result.stdout.splitlines() == ["MW", "*"]


def test_cli_unknown_table_falls_back():
    result = run_cli("decode", "--table", "999", "aga")
    assert result.stdout.strip() == "R"
    assert "falling back" in result.stderr


def test_cli_table_option():
    result = run_cli("decode", "--table", "2", "aga")
    assert result.stdout.strip() == "*"


def test_cli_profile(tmp_path: Path):
    profile = tmp_path / "profile.yaml"
    profile.write_text(f"kind: {PROFILE_KIND}\noverrides:\n  - {{pattern: tag, symbol: O}}\n", encoding="utf-8")
    result = run_cli("encode", "--profile", str(profile), "hi", check=False)
    assert result.returncode == 2
    assert "without a triplet" in result.stderr


def test_cli_rejects_text_and_input(tmp_path: Path):
    path = tmp_path / "m.txt"
    path.write_text("hi\n", encoding="utf-8")
    result = run_cli("encode", "hi", "--input", str(path), check=False)
    assert result.returncode == 2
    assert "not both" in result.stderr


def test_cli_postcard(tmp_path: Path):
    out = tmp_path / "card.png"
    spec = tmp_path / "card.json"
    result = run_cli("postcard", "I love you", "--out", str(out), "--viz-spec", str(spec))
    assert out.exists()
    assert spec.exists()
    assert "Postcard saved" in result.stdout


def test_cli_malformed_profile_is_a_usage_error(tmp_path: Path):
    profile = tmp_path / "profile.yaml"
    profile.write_text("kind: [unclosed\n", encoding="utf-8")
    result = run_cli("encode", "--profile", str(profile), "hi", check=False)
    assert result.returncode == 2
    assert "not valid YAML" in result.stderr
    assert "Traceback" not in result.stderr


def test_cli_helix_dna_flag():
    as_dna = run_cli("helix", "--dna", "acgt")
    assert as_dna.stdout.splitlines()[0] == "     at"
    as_text = run_cli("helix", "a cat")
    expected = render_helix("gcttaatgtgctact")
    assert as_text.stdout.splitlines() == expected
