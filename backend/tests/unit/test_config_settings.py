"""Unit tests for application settings configuration."""

from pathlib import Path

from learninghub.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_admin_tokens_and_slug_exceptions_parse_from_env(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKENS", '{"secret": "admin-7"}')
    monkeypatch.setenv("SLUG_EXCEPTIONS", '{"F#": "fsharp"}')

    settings = Settings(_env_file=None)

    assert settings.admin_tokens == {"secret": "admin-7"}
    assert settings.slug_exceptions == {"F#": "fsharp"}
    assert settings.default_article_color == "blue"


def test_article_api_client_uses_configured_base_url(monkeypatch):
    from learninghub.config import get_settings
    from learninghub.infrastructure.dependencies import get_article_api_client

    monkeypatch.setattr(get_settings(), "api_base_url", "https://hub.example/api/v1/")

    client = get_article_api_client()

    assert client.base_url == "https://hub.example/api/v1"
