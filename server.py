"""Flask server for the sentiment analyzer."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from sentiment_app import (
    InvalidTextError,
    SentimentIntensityAnalyzer,
    Settings,
    format_sentiment,
)

load_dotenv()
SETTINGS = Settings.from_env()

logger = logging.getLogger(__name__)


def create_app(analyzer: Optional[SentimentIntensityAnalyzer] = None) -> Flask:
    if analyzer is None:
        analyzer = SentimentIntensityAnalyzer(
            SETTINGS.lexicon_path,
            SETTINGS.emoji_path,
            strict=SETTINGS.strict_load,
        )

    app = Flask(__name__)
    CORS(app)

    @app.get("/health")
    def health() -> tuple[str, int]:
        return "ok", 200

    @app.post("/sentimentAnalyzer")
    def analyze() -> tuple[Dict[str, Any], int]:
        payload = request.get_json(silent=True)
        text = payload.get("text") if isinstance(payload, dict) else None
        try:
            if text is None:
                raise InvalidTextError("Input text is required.")
            result = analyzer.score(text)
            return jsonify(format_sentiment(result)), 200
        except InvalidTextError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            logger.exception("Scoring failed")
            return jsonify({"error": f"Internal server error: {exc}"}), 500

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=SETTINGS.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(host=SETTINGS.host, port=SETTINGS.port)
