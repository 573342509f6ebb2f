import pytest

from sentiment_app import KnowledgeBase, SentimentIntensityAnalyzer


@pytest.fixture(scope="session")
def analyzer():
    """Analyzer on the bundled lexicon and emoji tables."""
    return SentimentIntensityAnalyzer()


@pytest.fixture(scope="session")
def tiny_kb():
    lexicon = {
        "good": 1.9,
        "bad": -2.5,
        "great": 3.1,
        "no": -1.2,
        "bomb": -2.2,
        "smiling": 1.6,
        "heart": 2.2,
    }
    emojis = {
        "😁": "smiling face",
        "❤": "heart",
        "❤️": "red heart",
    }
    return KnowledgeBase(lexicon=lexicon, emojis=emojis)


@pytest.fixture(scope="session")
def tiny(tiny_kb):
    """Analyzer on a small hand-built knowledge base with known valences."""
    return SentimentIntensityAnalyzer.from_knowledge_base(tiny_kb)
