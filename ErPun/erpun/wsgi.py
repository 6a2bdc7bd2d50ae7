"""
WSGI entry point for ErPun - "I hardly know her!" pun finder

For deployment behind a WSGI server:
1. Point the server at ``erpun.wsgi:application``
2. Set ERPUN_PRONUNCIATIONS and ERPUN_PARTS_OF_SPEECH to the lexicon files
   (defaults to the sample dictionary bundled in the package)
"""

from erpun import settings
from erpun.api import create_app, get_engine

application = create_app()

# Build the lexicon at startup rather than on the first request
if get_engine() is None:
    raise RuntimeError(
        "Could not load lexicon from "
        f"{settings.get_pronunciations_path()} and {settings.get_parts_of_speech_path()}"
    )
