"""
ErPun - "I hardly know her!" pun finder

Finds words that turn into a transitive verb once their trailing 'er'
sound is dropped ("lover" -> "love 'er?! I hardly know her!"), using:
- a pronunciation lexicon (IPA) for the phonetic lookup
- a part-of-speech lexicon for the grammatical check
"""

__version__ = "0.1.0"

from .engine import HardlyKnowHerEngine, format_reply
from .lexicon import LexiconCache, LexiconLoadError, build_lexicon, load_lexicon
from .models import ErPunResult, Lexicon, PartOfSpeech, UnknownPartOfSpeechError, WordResolution

__all__ = [
    "HardlyKnowHerEngine",
    "format_reply",
    "LexiconCache",
    "LexiconLoadError",
    "build_lexicon",
    "load_lexicon",
    "ErPunResult",
    "Lexicon",
    "PartOfSpeech",
    "UnknownPartOfSpeechError",
    "WordResolution",
]
