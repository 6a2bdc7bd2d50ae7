"""
Configuration for ErPun

Lexicon file locations come from the environment, falling back to the
sample dictionary bundled inside the package.
"""

import os

PACKAGE_DIR = os.path.abspath(os.path.dirname(__file__))
DICTIONARY_DIR = os.path.join(PACKAGE_DIR, 'dictionary')

DEFAULT_PRONUNCIATIONS_PATH = os.path.join(DICTIONARY_DIR, 'text_to_sounds.txt')
DEFAULT_PARTS_OF_SPEECH_PATH = os.path.join(DICTIONARY_DIR, 'pos.txt')


def get_pronunciations_path() -> str:
    return os.environ.get('ERPUN_PRONUNCIATIONS', DEFAULT_PRONUNCIATIONS_PATH)


def get_parts_of_speech_path() -> str:
    return os.environ.get('ERPUN_PARTS_OF_SPEECH', DEFAULT_PARTS_OF_SPEECH_PATH)
