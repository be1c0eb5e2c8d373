from imageref.config import Config


def test_defaults(monkeypatch):
    for var in ("LOG_LEVEL", "FLASK_HOST", "FLASK_PORT", "MAX_REFERENCE_LENGTH"):
        monkeypatch.delenv(var, raising=False)
    cfg = Config()
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.FLASK_HOST == "0.0.0.0"
    assert cfg.FLASK_PORT == 8080
    assert cfg.MAX_REFERENCE_LENGTH == 512


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FLASK_PORT", "9000")
    monkeypatch.setenv("MAX_REFERENCE_LENGTH", "64")
    cfg = Config()
    assert cfg.FLASK_PORT == 9000
    assert cfg.MAX_REFERENCE_LENGTH == 64
    assert "FLASK_PORT=9000" in repr(cfg)
