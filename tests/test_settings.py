from wordgrid.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "wordlist.txt"
    assert cfg.RANKING == "alpha"
    assert cfg.MAX_RESULTS == 0


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["RANKING"] == cfg.RANKING
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=7)
    assert errors == {}
    assert cfg.MAX_RESULTS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH="3")
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 3


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_ranking():
    cfg = _fresh_settings()
    errors = update_settings(cfg, RANKING="score")
    assert errors == {}
    assert cfg.RANKING == "score"


def test_update_unknown_ranking_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, RANKING="longest")
    assert "RANKING" in errors
    assert cfg.RANKING == "alpha"


def test_update_bad_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="lots")
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == 0


def test_update_negative_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH=-1)
    assert "MIN_WORD_LENGTH" in errors


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4, RANKING="score")
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.RANKING == "score"


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert "PORT" in errors
    assert cfg.PORT == 10001


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAX_RESULTS", "5")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("RANKING", "score")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.MAX_RESULTS == 5
    assert cfg.DEBUG is True
    assert cfg.RANKING == "score"
    assert cfg.DICTIONARY_PATH == tmp_path / "words.txt"


def test_update_ranking_with_non_string_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, RANKING=["score"])
    assert "RANKING" in errors
    assert cfg.RANKING == "alpha"


def test_unknown_ranking_in_environment_falls_back(monkeypatch):
    monkeypatch.setenv("RANKING", "longest")
    cfg = _fresh_settings()
    assert cfg.RANKING == "alpha"
