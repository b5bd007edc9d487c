from backend.app.core.settings import get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "Admissions Hub"
    assert settings.environment == "development"
    assert isinstance(settings.secret_key, str) and settings.secret_key
    assert isinstance(settings.database_url, str) and settings.database_url


def test_pagination_limits():
    settings = get_settings()
    assert settings.default_page_size == 20
    assert settings.max_page_size == 50


def test_settings_is_singleton():
    assert get_settings() is get_settings()
