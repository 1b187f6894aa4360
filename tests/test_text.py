import re

import pytest

from biohello.text import clean_nucleotides, normalize

SAMPLES = [
    "BioRuby is fun",
    "  hello,   world!! ",
    "HELLO*BIORUBY",
    "42 is the answer",
    "über-cool café",
    "",
    "***",
    "a\tb\nc",
]


@pytest.mark.parametrize("raw", SAMPLES)
def test_normalize_alphabet_and_idempotence(raw):
    message = normalize(raw)
    assert re.fullmatch(r"[A-Z*]*", message)
    assert normalize(message) == message
    assert not message.startswith("*")
    assert not message.endswith("*")
    assert "**" not in message


def test_normalize_examples():
    assert normalize("BioRuby is fun") == "BIORUBY*IS*FUN"
    assert normalize("I love you") == "I*LOVE*YOU"
    assert normalize("  hello,   world!! ") == "HELLO*WORLD"
    assert normalize("HELLO*BIORUBY") == "HELLO*BIORUBY"
    assert normalize("***") == ""


def test_clean_nucleotides():
    assert clean_nucleotides("AUG uaa\n") == "atgtaa"
    assert clean_nucleotides(" nac ATA ") == "nacata"
