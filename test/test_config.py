"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from eventdesk.config import Settings, get_settings


class TestSettings:
    def test_declared_defaults(self) -> None:
        # Environment variables may override runtime values; check the declared defaults.
        fields = Settings.model_fields
        assert fields["jwt_algorithm"].default == "HS256"
        assert fields["default_page_size"].default == 10
        assert fields["max_page_size"].default == 100
        assert fields["allow_registration_role_selection"].default is False
        assert fields["auto_create_tables"].default is False

    def test_cors_origins_list(self) -> None:
        settings = Settings(cors_origins="http://a.example, http://b.example ,,")

        assert settings.cors_origins_list == ["http://a.example", "http://b.example"]

    def test_log_level_is_upper_cased(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_bcrypt_rounds_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Settings(bcrypt_rounds=3)

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
        monkeypatch.setenv("APP_ENV", "qa")

        settings = get_settings()

        assert settings.default_page_size == 25
        assert settings.app_env == "qa"

    def test_invalid_app_env_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(app_env="staging")
