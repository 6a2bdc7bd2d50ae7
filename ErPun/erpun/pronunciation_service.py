"""
Pronunciation lookups for ErPun

Finds the words that sound like another word once a phonetic suffix is
stripped from its pronunciation.
"""

import logging

from .models import Lexicon

logger = logging.getLogger(__name__)

ER_SOUND = "ɝ"
"""IPA symbol for the stressed r-coloured vowel that ends words like 'smother'."""


class PronunciationService:
    """Read-only pronunciation queries over a Lexicon."""

    def __init__(self, lexicon: Lexicon):
        self._lexicon = lexicon

    def pronunciations_for(self, word: str) -> tuple[str, ...]:
        """All known pronunciations of a word, in lexicon order."""
        return self._lexicon.pronunciations.get(word.lower(), ())

    def words_for(self, pronunciation: str) -> tuple[str, ...]:
        """All words pronounced exactly this way, in lexicon order."""
        return self._lexicon.homophones.get(pronunciation, ())

    def find_homophones_after_stripping_suffix(self, word: str, suffix: str = ER_SOUND) -> list[str]:
        """
        Find the words that sound like `word` without its trailing `suffix`.

        Every pronunciation of the word is tried in turn; those that do not
        end with the suffix are skipped. The homophone lists of all matching
        pronunciations are concatenated without deduplication.

        Args:
            word: Word to look up (case-insensitive).
            suffix: Phonetic suffix to strip.

        Returns:
            Candidate words in scan order; empty if the word is unknown.
        """
        candidates = []

        for pronunciation in self.pronunciations_for(word):
            if not suffix or not pronunciation.endswith(suffix):
                continue

            stripped = pronunciation[:-len(suffix)]
            words = self.words_for(stripped)
            logger.debug(f"Found an er-less sound for '{word}': {stripped} -> {list(words)}")
            candidates.extend(words)

        return candidates
