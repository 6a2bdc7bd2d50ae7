"""
Main engine for ErPun

Orchestrates the 'er' pun lookup:
- PronunciationService strips the 'er' sound and finds homophones
- PartOfSpeechValidator keeps only verbs that can take an object
"""

import logging
from typing import Optional

from .lexicon import load_lexicon
from .models import ErPunResult, Lexicon, WordResolution
from .pronunciation_service import ER_SOUND, PronunciationService
from .validators import PartOfSpeechValidator

logger = logging.getLogger(__name__)

REPLY_TEMPLATE = "{word} 'er?! I hardly know her!"


def format_reply(er_less_word: str) -> str:
    """Build the reply text for a found pun."""
    return REPLY_TEMPLATE.format(word=er_less_word)


class HardlyKnowHerEngine:
    """
    Finds "I hardly know her!" puns.

    Usage:
        engine = HardlyKnowHerEngine.from_files("text_to_sounds.txt", "pos.txt")
        engine.resolve("smother")        # -> "smith"
        engine.find_pun("quit your smothering, mother").reply
    """

    def __init__(self, lexicon: Lexicon, suffix: str = ER_SOUND):
        """
        Initialize the engine.

        Args:
            lexicon: Fully built Lexicon, shared read-only.
            suffix: Phonetic suffix to strip (the 'er' sound).
        """
        self._lexicon = lexicon
        self._suffix = suffix
        self._pronunciation_service = PronunciationService(lexicon)
        self._validator = PartOfSpeechValidator(lexicon)

    @classmethod
    def from_files(cls, pronunciations_path: str, parts_of_speech_path: str) -> "HardlyKnowHerEngine":
        return cls(load_lexicon(pronunciations_path, parts_of_speech_path))

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    def resolve_word(self, word: str) -> WordResolution:
        """
        Look a single word up.

        Candidates are scanned in order and the first one that passes the
        part-of-speech check wins.
        """
        word = word.lower()
        candidates = self._pronunciation_service.find_homophones_after_stripping_suffix(
            word, self._suffix
        )

        er_less_word = None
        for candidate in candidates:
            if self._validator.qualifies(candidate):
                er_less_word = candidate
                break

        return WordResolution(word=word, er_less_word=er_less_word, candidates=candidates)

    def resolve(self, word: str) -> Optional[str]:
        """Return the er-less verb for a word, or None if there is no pun."""
        return self.resolve_word(word).er_less_word

    def find_pun(self, text: str) -> ErPunResult:
        """
        Scan a message word by word and stop at the first pun.

        Args:
            text: Message text; split on whitespace.

        Returns:
            ErPunResult with the reply text when a pun is found.
        """
        for word in text.lower().split():
            er_less_word = self.resolve(word)
            if er_less_word is not None:
                logger.info(f"Word discovered! {word} -> {er_less_word}")
                return ErPunResult(
                    sentence=text,
                    has_pun=1,
                    word=word,
                    er_less_word=er_less_word,
                    reply=format_reply(er_less_word)
                )

        return ErPunResult(sentence=text, has_pun=0)

    def find_puns(self, texts: list[str]) -> list[ErPunResult]:
        """Scan multiple messages."""
        return [self.find_pun(text) for text in texts]

    def get_status(self) -> dict:
        """Get engine status information."""
        return {
            "suffix": self._suffix,
            "words": len(self._lexicon.pronunciations),
            "pronunciations": len(self._lexicon.homophones),
            "parts_of_speech_entries": len(self._lexicon.parts_of_speech),
        }
