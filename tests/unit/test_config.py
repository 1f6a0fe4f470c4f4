"""Unit tests for configuration and settings."""
from pathlib import Path

from portal.config import Settings, get_settings, reset_settings_cache


class TestSettings:
    def test_get_settings_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_reset_settings_cache(self):
        settings1 = get_settings()
        reset_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_rate_limiting_disabled_from_environment(self):
        assert get_settings().rate_limiting_enabled is False

    def test_defaults(self):
        settings = Settings(_env_file=None, data_dir=Path("./data"))

        assert settings.port == 5000
        assert settings.uploads_url_prefix == "/uploads"
        assert settings.run_db_migrations is True
        assert settings.seed_default_users is True
        assert settings.require_moderator_for_approval is False
        assert settings.frontend_dir is None

    def test_partition_url_one_file_per_partition(self, tmp_path):
        settings = Settings(data_dir=tmp_path)

        faults_url = settings.partition_url("faults")
        users_url = settings.partition_url("users")

        assert faults_url == f"sqlite:///{tmp_path.as_posix()}/faults.sqlite"
        assert faults_url != users_url

    def test_custom_url_template(self):
        settings = Settings(database_url_template="postgresql://db/{partition}")

        assert settings.partition_url("courses") == "postgresql://db/courses"
