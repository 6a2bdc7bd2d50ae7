"""Shared fixtures: synthetic lexicons written to temporary files."""

import pytest

from erpun.engine import HardlyKnowHerEngine
from erpun.lexicon import build_lexicon

PRONUNCIATIONS = [
    ("fish", "fɪʃ"),
    ("hammer", "hæmɝ"),
    ("ham", "hæm"),
    ("smother", "smʌðɝ"),
    ("smith", "smʌð"),
]

PARTS_OF_SPEECH = [
    ("fish", "N"),
    ("ham", "N"),
    ("smith", "t"),
]


def pronunciation_lines(entries):
    return [f"{word}\t/{pronunciation}/" for word, pronunciation in entries]


def parts_of_speech_text(entries):
    return "\n".join(f"{word}\0{codes}" for word, codes in entries) + "\n"


def make_engine(pronunciations, parts_of_speech):
    lexicon = build_lexicon(pronunciation_lines(pronunciations), parts_of_speech_text(parts_of_speech))
    return HardlyKnowHerEngine(lexicon)


@pytest.fixture
def engine():
    return make_engine(PRONUNCIATIONS, PARTS_OF_SPEECH)


@pytest.fixture
def lexicon_files(tmp_path):
    """Write the default synthetic lexicon to disk and return both paths."""
    pronunciations_path = tmp_path / "text_to_sounds.txt"
    pronunciations_path.write_text("\n".join(pronunciation_lines(PRONUNCIATIONS)) + "\n", encoding="utf-8")

    parts_of_speech_path = tmp_path / "pos.txt"
    parts_of_speech_path.write_text(parts_of_speech_text(PARTS_OF_SPEECH), encoding="utf-8")

    return str(pronunciations_path), str(parts_of_speech_path)
