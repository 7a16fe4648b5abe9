"""
Unit tests for settings loading.

Run: pytest tests/unit/test_config.py -v
"""

from config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)  # no .env file
        for name in ["DATABASE_URL", "SEED_QUIZZES", "LOG_LEVEL", "LOG_FILE", "PROMPT", "CREDITS_AUTHORS"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.database_url == "sqlite:///quizzes.sqlite"
        assert settings.seed_quizzes is True
        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.is_sqlite()

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DATABASE_URL", "sqlite:///other.sqlite")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SEED_QUIZZES", "false")
        monkeypatch.setenv("CREDITS_AUTHORS", '["Ada", "Grace"]')

        settings = Settings()

        assert settings.database_url == "sqlite:///other.sqlite"
        assert settings.log_level == "DEBUG"
        assert settings.seed_quizzes is False
        assert settings.credits_authors == ["Ada", "Grace"]

    def test_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PROMPT", raising=False)
        (tmp_path / ".env").write_text("PROMPT='trivia> '\n", encoding="utf-8")

        assert Settings().prompt == "trivia> "
