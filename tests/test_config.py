from config import Settings, get_settings


class TestSettings:
    """Environment-driven settings."""

    def test_default_values(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.database_url is None
        assert settings.db_min_pool_size == 2
        assert settings.db_max_pool_size == 10
        assert settings.cors_origins == ["http://localhost:5173"]
        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.stats_round_limit == 500

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://golf@localhost/stats")
        monkeypatch.setenv("DB_MAX_POOL_SIZE", "4")
        monkeypatch.setenv("CORS_ORIGINS", '["https://app.example.com"]')
        monkeypatch.setenv("DEBUG", "true")

        settings = get_settings()

        assert settings.database_url == "postgresql://golf@localhost/stats"
        assert settings.db_max_pool_size == 4
        assert settings.cors_origins == ["https://app.example.com"]
        assert settings.debug is True
