#!/usr/bin/env python3
import argparse
import json
import sys

from kanaconv.config import Settings, load_settings
from kanaconv.converter import JapaneseConverter
from kanaconv.logger import logger
from kanaconv.nlp import get_analyzer
from kanaconv.nlp.base import AnalyzerUnavailable, SegmentationMode


def serve(settings: Settings, host: str, port: int) -> None:
    """Start the HTTP server with one analyzer shared by all requests.

    If the analyzer cannot be built now, the server still starts; requests
    get a 503 and the build is retried on the next one.
    """
    from kanaconv.server import create_app

    try:
        analyzer = get_analyzer("janome", user_dictionary=settings.user_dictionary)
    except AnalyzerUnavailable as e:
        logger.error(f"Starting without analyzer, will retry per request: {e}")
        app = create_app(converter=None, settings=settings)
    else:
        converter = JapaneseConverter(
            analyzer,
            normalize_halfwidth=settings.normalize_halfwidth,
            default_mode=settings.segmentation_mode,
        )
        app = create_app(converter=converter, settings=settings)

    logger.info(f"Server starting on {host}:{port}")
    app.run(host=host, port=port, threaded=True)


def convert(settings: Settings, text: str, mode: str, debug: bool) -> int:
    """Convert one string and print the result as JSON."""
    try:
        analyzer = get_analyzer("janome", user_dictionary=settings.user_dictionary)
        converter = JapaneseConverter(analyzer, normalize_halfwidth=settings.normalize_halfwidth)
        result = converter.convert(text, mode=SegmentationMode(mode), debug=debug)
    except AnalyzerUnavailable as e:
        logger.error(str(e))
        return 1

    output = {
        "hiragana": result.hiragana,
        "katakana": result.katakana,
        "romanji": result.romanji,
    }
    if debug:
        output["debug"] = [
            {"surface": t.surface, "reading": t.reading, "source": t.source} for t in result.tokens
        ]
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


def main():
    settings = load_settings()
    logger.setLevel(settings.log_level)

    parser = argparse.ArgumentParser(
        description="Convert Japanese text to Hiragana, Katakana and romanji"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP conversion service")
    serve_parser.add_argument("--host", default=settings.host, help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")

    convert_parser = subparsers.add_parser("convert", help="Convert a single string")
    convert_parser.add_argument("text", help="Japanese text to convert")
    convert_parser.add_argument(
        "--mode",
        choices=[m.value for m in SegmentationMode],
        default=settings.segmentation_mode.value,
        help="Segmentation mode (default: %(default)s)"
    )
    convert_parser.add_argument("--debug", action="store_true", help="Include per-token readings")

    args = parser.parse_args()

    if args.command == "serve":
        serve(settings, args.host, args.port)
        return 0
    return convert(settings, args.text, args.mode, args.debug)


if __name__ == "__main__":
    sys.exit(main())
