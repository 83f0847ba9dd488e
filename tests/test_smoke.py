"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify app package can be imported."""
    from account_service.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "default_user_pic")


def test_settings_read_environment(mock_env):
    from account_service.core.config import Settings

    settings = Settings()
    assert settings.mongo_database_name == "test_account_db"
    assert settings.jwt_secret_key == "test_secret_key_for_testing_only"
    assert settings.default_user_pic == "https://example.com/default.png"
    assert settings.port == 5002
