from utils.config import DEFAULT_API_URL, load_config, redact


def _clear_env(monkeypatch):
    for name in ("API_URL", "ENCRYPTION_KEY", "REQUEST_TIMEOUT", "CACHE_TTL", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("utils.config.find_dotenv", lambda: "")


def test_load_config_creates_dirs(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    cfg = load_config()
    assert cfg.data_dir.exists()
    assert cfg.sessions_dir == cfg.data_dir / "sessions"
    assert cfg.api_url == DEFAULT_API_URL
    assert cfg.default_language == "es"
    assert cfg.encryption_key is None


def test_load_config_reads_environment(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("API_URL", "https://api.example.com/")
    monkeypatch.setenv("REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("CACHE_TTL", "-3")
    monkeypatch.setenv("DEFAULT_LANGUAGE", "EN")
    cfg = load_config()
    assert cfg.api_url == "https://api.example.com"
    assert cfg.request_timeout == 5.0
    assert cfg.cache_ttl == 30.0
    assert cfg.default_language == "en"


def test_unsupported_language_falls_back(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")
    assert load_config().default_language == "es"


def test_redact():
    assert redact(None) == ""
    assert redact("abc") == "***"
    assert redact("supersecretkey") == "***tkey"
