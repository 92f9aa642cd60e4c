from rawfin_cli import config


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    cfg = config.AppConfig(base_url="https://staging.rawfin.tv/api", timeout_s=5.0, max_retries=2, beacon=True)

    path = config.save_config(cfg)
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert loaded == cfg


def test_load_config_missing_file_returns_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda _: str(tmp_path / "nope"))
    assert config.load_config() == config.default_config()


def test_from_toml_ignores_bad_values() -> None:
    cfg = config.from_toml({"base_url": "", "timeout_s": "slow", "max_retries": 0, "beacon": "yes"})

    assert cfg.base_url == "https://rawfin.tv/api"
    assert cfg.timeout_s == 10.0
    assert cfg.max_retries == 1
    assert cfg.beacon is False


def test_resolve_base_url_env_override(monkeypatch) -> None:
    cfg = config.default_config()
    monkeypatch.setenv(config.ENV_BASE_URL, "http://127.0.0.1:8030/api/")
    assert config.resolve_base_url(cfg) == "http://127.0.0.1:8030/api"


def test_resolve_base_url_from_config(monkeypatch) -> None:
    cfg = config.default_config()
    cfg.base_url = "https://api.example.test/"
    monkeypatch.delenv(config.ENV_BASE_URL, raising=False)
    assert config.resolve_base_url(cfg) == "https://api.example.test"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("rawfin.tv/api") == "https://rawfin.tv/api"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("localhost:8010/api") == "http://localhost:8010/api"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://rawfin.tv/api/") == "https://rawfin.tv/api"
