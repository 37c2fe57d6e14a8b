# -*- coding: utf-8 -*-
import os, logging
from pathlib import Path
from datetime import datetime

from flask import Flask, jsonify
from dotenv import load_dotenv

from blueprints.words import words_bp

# ----------------- Config -----------------
load_dotenv()
PORT = int(os.environ.get("PORT", "8000"))
SECRET_KEY = os.environ.get("SECRET_KEY", "change-me-please")
URL_PREFIX = os.environ.get("URL_PREFIX", "") or ""   # e.g. /numwords
DATA_DIR = os.environ.get("DATA_DIR", "data")
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
DEFAULT_LANG = (os.environ.get("DEFAULT_LANG") or "").strip()

# ----------------- Flask -----------------
app = Flask(__name__)
app.config["SECRET_KEY"] = SECRET_KEY
app.config["DEFAULT_LANG"] = DEFAULT_LANG

DATA_PATH = Path(DATA_DIR).resolve(); DATA_PATH.mkdir(parents=True, exist_ok=True)
app.config["DATA_DIR"] = str(DATA_PATH)
LOG_FILE = str((DATA_PATH / "activity.log").resolve())

# ----------------- Logging -----------------
class LocalTimeFormatter(logging.Formatter):
    converter = datetime.fromtimestamp
    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        return ct.strftime(datefmt or "%Y-%m-%d %H:%M:%S")

app.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
_handler.setFormatter(LocalTimeFormatter("%(asctime)s  %(levelname)s  %(message)s"))
app.logger.addHandler(_handler)

# ----------------- Routes -----------------
app.register_blueprint(words_bp, url_prefix=f"{URL_PREFIX}/api")


@app.route(URL_PREFIX + "/health", methods=["GET"])
def health():
    return jsonify({"ok": True, "default_lang": app.config["DEFAULT_LANG"] or None})


@app.errorhandler(404)
def not_found(_exc):
    return jsonify({"ok": False, "message": "not found"}), 404


if __name__ == "__main__":
    if URL_PREFIX:
        print("Running with URL prefix:", URL_PREFIX)
    print(f"Activity log: {LOG_FILE}")
    app.run(host="0.0.0.0", port=PORT, debug=True)
