import io
import logging

import pytest

from sentiment_app import KnowledgeBase, LoadError, SentimentIntensityAnalyzer, load_emojis, load_lexicon


def test_lexicon_from_stream_ignores_extra_columns():
    src = io.StringIO("good\t1.9\t0.9434\t[2, 1, 2]\nbad\t-2.5\t0.67082\t[-2, -3]\n\n")
    assert load_lexicon(src) == {"good": 1.9, "bad": -2.5}


def test_lexicon_from_path(tmp_path):
    path = tmp_path / "lex.txt"
    path.write_text("great\t3.1\t0.7\n", encoding="utf-8")
    assert load_lexicon(path) == {"great": 3.1}
    assert load_lexicon(str(path)) == {"great": 3.1}


def test_emojis_from_lines():
    assert load_emojis(["😁\tbeaming face with smiling eyes", ""]) == {
        "😁": "beaming face with smiling eyes"
    }


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(LoadError):
        load_lexicon(tmp_path / "nope.txt")
    with pytest.raises(LoadError):
        SentimentIntensityAnalyzer(emoji_source=tmp_path / "nope.txt")


@pytest.mark.parametrize("line", ["good", "good\tvery", "good\tnan"])
def test_malformed_lexicon_line_is_fatal_when_strict(line):
    with pytest.raises(LoadError, match=":2:"):
        load_lexicon(["bad\t-2.5", line])


def test_malformed_emoji_line_is_fatal_when_strict():
    with pytest.raises(LoadError):
        load_emojis(["😁"])


def test_lenient_load_skips_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="sentiment_app.lexicon"):
        lexicon = load_lexicon(["good\t1.9", "oops", "bad\tx"], strict=False)
    assert lexicon == {"good": 1.9}
    assert "Skipping malformed line" in caplog.text


def test_knowledge_base_is_read_only():
    kb = KnowledgeBase(lexicon={"good": 1.9}, emojis={"❤️": "red heart"})
    assert kb.max_emoji_len == 2
    with pytest.raises(TypeError):
        kb.lexicon["good"] = 0.0
    with pytest.raises(AttributeError):
        kb.lexicon = {}


def test_knowledge_base_copies_input():
    lexicon = {"good": 1.9}
    kb = KnowledgeBase(lexicon=lexicon, emojis={})
    lexicon["bad"] = -2.5
    assert "bad" not in kb.lexicon


def test_bundled_tables(analyzer):
    assert analyzer.kb.lexicon["good"] == pytest.approx(1.9)
    assert analyzer.kb.emojis["😁"] == "beaming face with smiling eyes"
    assert len(analyzer.kb.lexicon) > 7000


@pytest.mark.parametrize("word", ["heart", "hearts", "flawed"])
def test_bundled_lexicon_matches_published_scores(analyzer, word):
    # later lexicon releases add these and change emoji descriptions' scores
    assert word not in analyzer.kb.lexicon


def test_bundled_heart_emoji_scores(analyzer):
    res = analyzer.score("Catch utf-8 emoji such as such as 💘 and 💋 and 😁")
    assert res.compound == pytest.approx(0.7003, abs=0.5e-3)
    assert res.positive == pytest.approx(0.254, abs=0.5e-3)
