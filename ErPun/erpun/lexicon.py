"""
Lexicon loading for ErPun

Builds the three lookup maps from flat lexical data:
- pronunciation lexicon: one ``word<TAB>/pronunciation/`` entry per line
- part-of-speech lexicon: ``word<NUL>codes`` entries separated by newlines
"""

import logging
import threading
from typing import Callable, Iterable, Optional

from .models import Lexicon, PartOfSpeech, UnknownPartOfSpeechError

logger = logging.getLogger(__name__)

PRONUNCIATION_SEPARATOR = "\t"
PART_OF_SPEECH_SEPARATOR = "\0"
PRONUNCIATION_DELIMITER = "/"


class LexiconLoadError(ValueError):
    """Raised when lexical data is malformed. The lexicon is never partially built."""

    def __init__(self, source: str, line_number: int, reason: str):
        self.source = source
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{source}:{line_number}: {reason}")


def _strip_delimiters(field: str) -> Optional[str]:
    """Remove the surrounding slashes of a pronunciation, None if either is missing."""
    if len(field) < 2:
        return None
    if not (field.startswith(PRONUNCIATION_DELIMITER) and field.endswith(PRONUNCIATION_DELIMITER)):
        return None
    return field[1:-1]


def parse_pronunciations(
        lines: Iterable[str],
        source: str = "<pronunciations>"
) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
    """
    Parse pronunciation lexicon lines.

    Args:
        lines: Lines of the form ``word<TAB>/pronunciation/``.
        source: Name used in error messages.

    Returns:
        Tuple of (word -> pronunciations, pronunciation -> words), both in
        the order entries were read.
    """
    pronunciations: dict[str, list[str]] = {}
    homophones: dict[str, list[str]] = {}

    for line_number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        word, separator, field = line.partition(PRONUNCIATION_SEPARATOR)
        if not separator:
            raise LexiconLoadError(source, line_number, f"missing tab separator in {line!r}")

        pronunciation = _strip_delimiters(field)
        if pronunciation is None:
            raise LexiconLoadError(
                source, line_number,
                f"pronunciation {field!r} of {word!r} is not wrapped in slashes"
            )

        word = word.lower()
        pronunciations.setdefault(word, []).append(pronunciation)
        homophones.setdefault(pronunciation, []).append(word)

    return pronunciations, homophones


def parse_parts_of_speech(
        text: str,
        source: str = "<parts of speech>"
) -> dict[str, list[PartOfSpeech]]:
    """
    Parse the part-of-speech lexicon.

    Every code character is decoded on its own; an unknown code is fatal.
    """
    parts_of_speech: dict[str, list[PartOfSpeech]] = {}

    for line_number, entry in enumerate(text.split("\n"), 1):
        entry = entry.rstrip("\r")
        if not entry:
            continue

        word, separator, codes = entry.partition(PART_OF_SPEECH_SEPARATOR)
        if not separator:
            raise LexiconLoadError(source, line_number, f"missing NUL separator in {entry!r}")

        try:
            tags = [PartOfSpeech.from_code(code) for code in codes]
        except UnknownPartOfSpeechError as e:
            raise LexiconLoadError(
                source, line_number,
                f"unrecognized part-of-speech code {e.code!r} for word {word!r}"
            ) from e

        parts_of_speech.setdefault(word.lower(), []).extend(tags)

    return parts_of_speech


def build_lexicon(
        pronunciation_lines: Iterable[str],
        parts_of_speech_text: str,
        pronunciation_source: str = "<pronunciations>",
        parts_of_speech_source: str = "<parts of speech>"
) -> Lexicon:
    """Build a Lexicon from in-memory lexical data."""
    pronunciations, homophones = parse_pronunciations(pronunciation_lines, pronunciation_source)
    parts_of_speech = parse_parts_of_speech(parts_of_speech_text, parts_of_speech_source)
    return Lexicon.from_dicts(pronunciations, homophones, parts_of_speech)


def load_lexicon(pronunciations_path: str, parts_of_speech_path: str) -> Lexicon:
    """
    Load a Lexicon from the two UTF-8 lexicon files.

    Raises:
        LexiconLoadError: If either file contains a malformed entry.
        OSError: If either file cannot be read.
    """
    with open(pronunciations_path, encoding="utf-8") as f:
        pronunciations, homophones = parse_pronunciations(f, pronunciations_path)

    with open(parts_of_speech_path, encoding="utf-8", newline="") as f:
        parts_of_speech = parse_parts_of_speech(f.read(), parts_of_speech_path)

    lexicon = Lexicon.from_dicts(pronunciations, homophones, parts_of_speech)
    logger.info(
        f"Lexicon loaded: {len(lexicon.pronunciations)} words, "
        f"{len(lexicon.homophones)} pronunciations, "
        f"{len(lexicon.parts_of_speech)} part-of-speech entries"
    )
    return lexicon


class LexiconCache:
    """
    Builds a Lexicon once and hands the same instance to every caller.

    Usage:
        cache = LexiconCache(lambda: load_lexicon("text_to_sounds.txt", "pos.txt"))
        lexicon = cache.get()
    """

    def __init__(self, factory: Callable[[], Lexicon]):
        self._factory = factory
        self._lexicon: Optional[Lexicon] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._lexicon is not None

    def get(self) -> Lexicon:
        """Return the Lexicon, building it on first use."""
        lexicon = self._lexicon
        if lexicon is not None:
            return lexicon

        with self._lock:
            if self._lexicon is None:
                self._lexicon = self._factory()
            return self._lexicon
