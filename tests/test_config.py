from app.core.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        s = Settings(_env_file=None)

        assert s.PORT == 4000
        assert s.GRAPHQL_PATH == "/graphql"
        assert s.CORS_ORIGINS == ["*"]
        assert s.DATABASE_URL.startswith("postgresql+psycopg://")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("GRAPHQL_IDE", "false")
        s = Settings(_env_file=None)

        assert s.PORT == 8080
        assert s.GRAPHQL_IDE is False

    def test_cached(self):
        assert get_settings() is get_settings()
