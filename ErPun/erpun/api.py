"""
Flask API for ErPun - "I hardly know her!" pun finder

Provides REST endpoints for single-word lookups and message scans.
"""

import os
import logging
import threading
from flask import Flask, request, jsonify
from functools import wraps

from . import settings
from .engine import HardlyKnowHerEngine
from .lexicon import LexiconCache, LexiconLoadError, load_lexicon

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 5000
MAX_BATCH_SIZE = 10

# --- GLOBAL APP INSTANCE (Used by all decorators) ---

app = Flask(__name__)
app.json.sort_keys = False
app.json.ensure_ascii = False

lexicon_cache = LexiconCache(
    lambda: load_lexicon(settings.get_pronunciations_path(), settings.get_parts_of_speech_path())
)

# Engine is created on first use
engine = None
load_error = None
_engine_lock = threading.Lock()


# --- ENGINE MANAGEMENT ---

def get_engine():
    """Get or create the engine. Returns None if the lexicon failed to load."""
    global engine, load_error
    if engine is not None:
        return engine

    with _engine_lock:
        if engine is None:
            try:
                engine = HardlyKnowHerEngine(lexicon_cache.get())
                load_error = None
                logger.info("ErPun engine initialized successfully.")
            except (LexiconLoadError, OSError) as e:
                load_error = str(e)
                logger.error(f"Lexicon load error: {e}")
    return engine


def reset_engine(cache=None):
    """Drop the current engine, optionally swapping the lexicon source."""
    global engine, load_error, lexicon_cache
    with _engine_lock:
        engine = None
        load_error = None
        if cache is not None:
            lexicon_cache = cache


def require_lexicon(f):
    """Decorator to ensure the lexicon is loaded before handling request."""
    @wraps(f)
    def decorated(*args, **kwargs):
        if get_engine() is None:
            return jsonify({
                "error": "Lexicon not loaded",
                "message": load_error or "Lexicon failed to load."
            }), 503
        return f(*args, **kwargs)
    return decorated


def _json_body():
    """Request body as a JSON object, None if it is missing or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


# =============================================================================
# API Endpoints
# =============================================================================

@app.route('/status', methods=['GET'])
def status():
    """Get engine status."""
    eng = get_engine()
    if eng is None:
        return jsonify({"status": "not_loaded", "message": load_error})
    return jsonify({
        "status": "ready",
        **eng.get_status()
    })


@app.route('/resolve', methods=['POST'])
@require_lexicon
def resolve():
    """
    Look a single word up.

    Request body:
    {
        "word": "lover"
    }

    Response:
    {
        "word": "lover",
        "er_less_word": "love" or null,
        "candidates": [...]
    }
    """
    data = _json_body()

    if not data or 'word' not in data:
        return jsonify({
            "error": "Missing word",
            "message": "Provide 'word' in request body"
        }), 400

    word = data['word']
    if not isinstance(word, str):
        return jsonify({
            "error": "Invalid format",
            "message": "'word' must be a string"
        }), 400

    return jsonify(get_engine().resolve_word(word).to_dict())


@app.route('/analyze', methods=['POST'])
@require_lexicon
def analyze():
    """
    Scan a message for an 'er' pun.

    Request body:
    {
        "sentence": "The message to scan"
    }

    Response:
    {
        "sentence": "...",
        "has_pun": 1 or 0,
        "word": "...",
        "er_less_word": "...",
        "reply": "..."
    }
    """
    data = _json_body()

    if not data or 'sentence' not in data:
        return jsonify({
            "error": "Missing sentence",
            "message": "Provide 'sentence' in request body"
        }), 400

    if not isinstance(data['sentence'], str):
        return jsonify({
            "error": "Invalid format",
            "message": "'sentence' must be a string"
        }), 400

    sentence = data['sentence'].strip()

    if not sentence:
        return jsonify({
            "error": "Empty sentence",
            "message": "Sentence cannot be empty"
        }), 400

    if len(sentence) > MAX_MESSAGE_LENGTH:
        return jsonify({
            "error": "Sentence too long",
            "message": f"Maximum sentence length is {MAX_MESSAGE_LENGTH} characters"
        }), 400

    return jsonify(get_engine().find_pun(sentence).to_dict())


@app.route('/analyze/batch', methods=['POST'])
@require_lexicon
def analyze_batch():
    """
    Scan multiple messages.

    Request body:
    {
        "sentences": ["message1", "message2", ...]
    }

    Response:
    {
        "results": [
            {scan result 1},
            {scan result 2},
            ...
        ]
    }
    """
    data = _json_body()

    if not data or 'sentences' not in data:
        return jsonify({
            "error": "Missing sentences",
            "message": "Provide 'sentences' array in request body"
        }), 400

    sentences = data['sentences']

    if not isinstance(sentences, list) or not all(isinstance(s, str) for s in sentences):
        return jsonify({
            "error": "Invalid format",
            "message": "'sentences' must be an array of strings"
        }), 400

    if len(sentences) > MAX_BATCH_SIZE:
        return jsonify({
            "error": "Too many sentences",
            "message": f"Maximum {MAX_BATCH_SIZE} sentences per batch request"
        }), 400

    results = get_engine().find_puns(sentences)
    return jsonify({
        "results": [r.to_dict() for r in results]
    })

# =============================================================================
# Error Handlers
# =============================================================================

@app.errorhandler(400)
def bad_request(e):
    return jsonify({"error": "Bad request", "message": str(e)}), 400

@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "Not found", "message": "Endpoint not found"}), 404

@app.errorhandler(500)
def internal_error(e):
    logger.error(f"Unhandled error: {getattr(e, 'original_exception', e)!r}")
    return jsonify({"error": "Internal error", "message": "The server could not complete the request"}), 500


# =============================================================================
# Main Entry Point (WSGI Compatibility)
# =============================================================================

def create_app():
    return app


if __name__ == '__main__':
    # Development server
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'

    app.run(host='0.0.0.0', port=port, debug=debug)
