"""HTTP interface for the converter."""

import threading
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from pydantic import ValidationError

from kanaconv.config import Settings, load_settings
from kanaconv.converter import JapaneseConverter
from kanaconv.logger import logger
from kanaconv.nlp import get_analyzer
from kanaconv.nlp.base import AnalyzerUnavailable
from kanaconv.schema import ConvertRequest, ConvertResponse, TokenTrace


def create_app(converter: Optional[JapaneseConverter] = None, settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app.

    When no converter is passed, one is created on the first request that
    needs the analyzer and reused afterwards.
    """
    settings = settings or load_settings()

    app = Flask(__name__)
    app.json.ensure_ascii = False
    CORS(
        app,
        origins="*" if settings.cors_origins == ("*",) else list(settings.cors_origins),
        methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    state = {"converter": converter}
    init_lock = threading.Lock()

    def get_converter() -> JapaneseConverter:
        with init_lock:
            if state["converter"] is None:
                analyzer = get_analyzer("janome", user_dictionary=settings.user_dictionary)
                state["converter"] = JapaneseConverter(
                    analyzer,
                    normalize_halfwidth=settings.normalize_halfwidth,
                    default_mode=settings.segmentation_mode,
                )
            return state["converter"]

    @app.route("/convert", methods=["POST"])
    def convert():
        payload = request.get_json(force=True, silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Invalid request"}), 400

        try:
            req = ConvertRequest.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Rejected convert request: {e.error_count()} validation error(s)")
            return jsonify({"error": "Invalid request"}), 400

        if not req.text:
            empty = ConvertResponse(hiragana="", katakana="", romanji="", debug=[] if req.debug else None)
            return jsonify(empty.model_dump(exclude_none=True))

        try:
            result = get_converter().convert(req.text, mode=req.mode, debug=req.debug)
        except AnalyzerUnavailable as e:
            logger.error(f"Conversion failed: {e}")
            return jsonify({"error": "Analyzer unavailable"}), 503

        res = ConvertResponse(
            hiragana=result.hiragana,
            katakana=result.katakana,
            romanji=result.romanji,
            debug=(
                [TokenTrace(surface=t.surface, reading=t.reading, source=t.source) for t in result.tokens]
                if result.tokens is not None else None
            ),
        )
        return jsonify(res.model_dump(exclude_none=True))

    return app
