# blueprints/words.py
from flask import Blueprint, current_app, jsonify, request

from numwords import NumWordsError, convert, parse_number, supported_languages
from numwords.parsing import Mode, parse_mode

words_bp = Blueprint("words", __name__)


def _error(message, status):
    return jsonify({"ok": False, "message": message}), status


@words_bp.get("/words")
def api_words():
    """
    ?number=...&mode=words|ordinal|currency|decimal|roman&lang=en|es|ar
    returns: {ok, text, mode, lang}
    """
    raw = (request.args.get("number") or "").strip()
    if not raw:
        return _error("no number provided", 400)
    lang = (request.args.get("lang") or "").strip() or None

    try:
        mode = parse_mode(request.args.get("mode"))
        if lang is None and mode is Mode.WORDS:
            lang = current_app.config.get("DEFAULT_LANG") or None
        text = convert(parse_number(raw), mode, lang)
    except NumWordsError as exc:
        current_app.logger.info(f"[words] rejected {raw!r}: {exc}")
        return _error(str(exc), 400)
    except Exception as exc:
        current_app.logger.exception("words conversion failed: %s", exc)
        return _error(str(exc), 500)

    return jsonify({"ok": True, "text": text, "mode": mode.value, "lang": lang})


@words_bp.get("/num2words")
def api_num2words():
    amount = (request.args.get("amount") or "0").strip()
    try:
        text = convert(parse_number(amount), Mode.CURRENCY)
        return jsonify({"ok": True, "text": text})
    except NumWordsError:
        return jsonify({"ok": False, "text": ""}), 400


@words_bp.get("/languages")
def api_languages():
    return jsonify({"ok": True, "languages": supported_languages()})
