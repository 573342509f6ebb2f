# sentiment_app/__init__.py
"""
Public package interface for sentiment_app.

Exports a stable API for the rest of the app regardless of how the scoring
modules are split internally.
"""

from .analyzer import Sentiment, SentimentIntensityAnalyzer
from .config import Settings
from .errors import InvalidTextError, LoadError
from .formatter import format_sentiment, label_for
from .lexicon import KnowledgeBase, load_emojis, load_lexicon

__all__ = [
    "Sentiment",
    "SentimentIntensityAnalyzer",
    "KnowledgeBase",
    "load_lexicon",
    "load_emojis",
    "format_sentiment",
    "label_for",
    "Settings",
    "InvalidTextError",
    "LoadError",
]
