from sentiment_app import Settings

ENV_VARS = (
    "SENTIMENT_LEXICON_PATH",
    "SENTIMENT_EMOJI_PATH",
    "SENTIMENT_STRICT_LOAD",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


def test_defaults(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env() == Settings()


def test_overrides(monkeypatch):
    monkeypatch.setenv("SENTIMENT_LEXICON_PATH", "/data/lex.txt")
    monkeypatch.setenv("SENTIMENT_STRICT_LOAD", "no")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings.from_env()
    assert settings.lexicon_path == "/data/lex.txt"
    assert settings.emoji_path is None
    assert settings.strict_load is False
    assert settings.log_level == "DEBUG"
    assert settings.port == 8080
