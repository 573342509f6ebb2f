"""Output formatting helpers."""
from typing import Dict, Union

from .analyzer import Sentiment

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05


def label_for(compound: float) -> str:
    if compound >= POSITIVE_THRESHOLD:
        return "positive"
    if compound <= NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def format_sentiment(result: Sentiment) -> Dict[str, Union[float, str]]:
    """Return a dict in the shape served by the HTTP endpoint.

    Example shape:
    {
        "neg": 0.0,
        "neu": 0.254,
        "pos": 0.746,
        "compound": 0.8316,
        "label": "positive",
    }
    """
    return {
        "neg": round(result.negative, 3),
        "neu": round(result.neutral, 3),
        "pos": round(result.positive, 3),
        "compound": round(result.compound, 4),
        "label": label_for(result.compound),
    }
