"""
Data models for ErPun - "I hardly know her!" pun finder
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class UnknownPartOfSpeechError(ValueError):
    """Raised when a part-of-speech code character is not in the code alphabet."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unrecognized part-of-speech code: {code!r}")


class PartOfSpeech(str, Enum):
    """Grammatical categories of the part-of-speech lexicon, keyed by their code."""

    NOUN = "N"
    PLURAL = "p"
    NOUN_PHRASE = "h"
    VERB_USU_PARTICIPLE = "V"
    """Verb, usually as a participle (e.g. adjectival past-participle forms)."""

    VERB_TRANSITIVE = "t"
    VERB_INTRANSITIVE = "i"
    ADJECTIVE = "A"
    ADVERB = "v"
    CONJUNCTION = "C"
    PREPOSITION = "P"
    INTERJECTION = "!"
    PRONOUN = "r"
    DEFINITE_ARTICLE = "D"
    INDEFINITE_ARTICLE = "I"
    NOMINATIVE = "o"
    E = "e"
    """Unclassified."""

    @classmethod
    def from_code(cls, code: str) -> "PartOfSpeech":
        """Decode a single code character, raising UnknownPartOfSpeechError if unknown."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownPartOfSpeechError(code) from None


@dataclass(frozen=True)
class Lexicon:
    """The three lookup maps built by the lexicon loader. Read-only once built."""

    pronunciations: Mapping[str, tuple[str, ...]]
    """Word -> pronunciations, in the order they were read."""

    homophones: Mapping[str, tuple[str, ...]]
    """Pronunciation -> words sharing it, in the order they were read."""

    parts_of_speech: Mapping[str, tuple[PartOfSpeech, ...]]
    """Word -> part-of-speech tags."""

    @classmethod
    def from_dicts(
            cls,
            pronunciations: dict[str, list[str]],
            homophones: dict[str, list[str]],
            parts_of_speech: dict[str, list[PartOfSpeech]]
    ) -> "Lexicon":
        """Freeze plain list-valued dicts into a Lexicon."""
        return cls(
            pronunciations=MappingProxyType({k: tuple(v) for k, v in pronunciations.items()}),
            homophones=MappingProxyType({k: tuple(v) for k, v in homophones.items()}),
            parts_of_speech=MappingProxyType({k: tuple(v) for k, v in parts_of_speech.items()}),
        )


@dataclass
class WordResolution:
    """Result of querying a single word."""

    word: str
    """The normalized query word."""

    er_less_word: Optional[str] = None
    """First qualifying verb found by stripping the 'er' sound, None if no pun."""

    candidates: list[str] = field(default_factory=list)
    """Every homophone of the er-less sound(s), in scan order."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "er_less_word": self.er_less_word,
            "candidates": list(self.candidates),
        }


@dataclass
class ErPunResult:
    """Result of scanning a message for an 'er' pun."""

    sentence: str
    """The original message."""

    has_pun: int
    """1 if a word of the message produced a pun, 0 otherwise."""

    word: Optional[str] = None
    """The token that triggered the pun."""

    er_less_word: Optional[str] = None
    """The verb left over once the 'er' is gone."""

    reply: Optional[str] = None
    """Reply text, e.g. "smith 'er?! I hardly know her!"."""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "sentence": self.sentence,
            "has_pun": self.has_pun,
            "word": self.word,
            "er_less_word": self.er_less_word,
            "reply": self.reply,
        }
