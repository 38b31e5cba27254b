from token_list.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "TOKEN_LIST_LOG_LEVEL",
        "TOKEN_LIST_FETCH_TIMEOUT_SECONDS",
        "TOKEN_LIST_FOLLOW_REDIRECTS",
        "TOKEN_LIST_REQUIRE_CHECKSUM_ADDRESSES",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.fetch_timeout_seconds is None
    assert settings.follow_redirects is True
    assert settings.require_checksum_addresses is False


def test_env_overrides(monkeypatch):
    """Prefixed environment variables configure the loader."""

    monkeypatch.setenv("TOKEN_LIST_FETCH_TIMEOUT_SECONDS", "7.5")
    monkeypatch.setenv("TOKEN_LIST_FOLLOW_REDIRECTS", "false")
    monkeypatch.setenv("token_list_require_checksum_addresses", "1")

    settings = Settings()

    assert settings.fetch_timeout_seconds == 7.5
    assert settings.follow_redirects is False
    assert settings.require_checksum_addresses is True


def test_unprefixed_env_is_ignored(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("TOKEN_LIST_LOG_LEVEL", raising=False)

    assert Settings().log_level == "INFO"


def test_env_file_is_read_from_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("TOKEN_LIST_FOLLOW_REDIRECTS", raising=False)
    (tmp_path / ".env").write_text("TOKEN_LIST_FOLLOW_REDIRECTS=false\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert Settings().follow_redirects is False
