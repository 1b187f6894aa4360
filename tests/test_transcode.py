import pytest

from biohello.codon import ALPHABET, build_codon_table
from biohello.text import normalize
from biohello.transcode import UnknownSymbolError, decode, encode, iter_triplets


@pytest.fixture
def table():
    return build_codon_table()


def test_hello_bioruby_round_trip(table):
    dna = encode("HELLO*BIORUBY", table)
    assert len(dna) == 3 * len("HELLO*BIORUBY")
    assert decode(dna, table) == "HELLO*BIORUBY"


def test_i_love_you_is_concrete_dna(table):
    dna = encode("I*LOVE*YOU", table)
    assert dna == "atttaattataggttgaataatattagtga"
    assert len(dna) == 30
    assert set(dna) <= set("acgt")


def test_decode_with_literal_wildcards(table):
    dna = "nacatatagagatganactattaaataagttaattttgaaat"
    assert decode(dna, table) == normalize("BioRuby is fun")


def test_round_trip_whole_alphabet(table):
    message = "".join(sorted(ALPHABET))
    assert decode(encode(message, table), table) == message


def test_decode_then_encode_is_lossy_for_shared_symbols(table):
    assert decode("aac", table) == "B"
    assert encode("B", table) == "tac"
    assert encode(decode("tac", table), table) == "tac"


def test_unknown_x_uses_wildcard_triplet(table):
    assert encode("X", table) == "nnn"
    assert decode("nnn", table) == "X"


def test_only_x_encodes_outside_acgt(table):
    outside = {symbol for symbol in ALPHABET if set(encode(symbol, table)) - set("acgt")}
    assert outside == {"X"}


def test_encode_rejects_symbols_without_triplet(table):
    with pytest.raises(UnknownSymbolError) as excinfo:
        encode("AB.C", table)
    assert excinfo.value.symbol == "."
    assert excinfo.value.position == 2
    with pytest.raises(KeyError):
        encode("hello", table)


def test_decode_never_raises_on_garbage(table):
    assert decode("qqqatg", table) == ".M"
    assert decode("xxx", table) == "."
    assert decode("atgat", table) == "M"
    assert decode("", table) == ""


def test_decode_normalizes_case_whitespace_and_rna(table):
    assert decode("AUG UAA\nTGG", table) == "M*W"


def test_default_table_is_built_when_missing():
    assert decode(encode("HI")) == "HI"


def test_iter_triplets_skips_partial_tail():
    assert list(iter_triplets("aaacccg")) == ["aaa", "ccc"]
