from app.core.config import Settings, settings


def test_settings_are_case_sensitive_and_read_dotenv():
    assert Settings.model_config["case_sensitive"] is True
    assert Settings.model_config["env_file"] == ".env"


def test_settings_come_from_environment():
    assert settings.SUPABASE_URL
    assert settings.JWT_SECRET
    assert settings.API_V1_STR == "/api/v1"
    assert settings.JWT_ALGORITHM == "HS256"


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30")

    loaded = Settings()

    assert loaded.LOG_LEVEL == "DEBUG"
    assert loaded.ACCESS_TOKEN_EXPIRE_MINUTES == 30
