"""
Grammatical validation for ErPun

A candidate only makes the joke work if it can take an object ("smith 'er"),
so it must be tagged as a transitive verb or a participle-only verb.
"""

import logging

from .models import Lexicon, PartOfSpeech

logger = logging.getLogger(__name__)

QUALIFYING_PARTS_OF_SPEECH = frozenset({
    PartOfSpeech.VERB_TRANSITIVE,
    PartOfSpeech.VERB_USU_PARTICIPLE,
})


class PartOfSpeechValidator:
    """Accepts candidate words by their part-of-speech tags."""

    def __init__(self, lexicon: Lexicon):
        self._lexicon = lexicon

    def parts_of_speech_for(self, word: str) -> tuple[PartOfSpeech, ...]:
        return self._lexicon.parts_of_speech.get(word.lower(), ())

    def qualifies(self, word: str) -> bool:
        """True iff the word carries a qualifying verb tag. Unknown words never qualify."""
        tags = self.parts_of_speech_for(word)
        if not tags:
            logger.debug(f"Rejected '{word}': no part-of-speech entry")
            return False
        if any(tag in QUALIFYING_PARTS_OF_SPEECH for tag in tags):
            return True
        logger.debug(f"Rejected '{word}': tags {[tag.name for tag in tags]}")
        return False
