"""Tests for configuration loading."""

from pathlib import Path

import pytest

from linksaver.config import Settings, get_settings, load_config


def test_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test defaults when no config file or environment is present."""
    for name in ("LINKSAVER_API_URL", "JINA_API_KEY", "LINKSAVER_CREDENTIALS_FILE"):
        monkeypatch.delenv(name, raising=False)
    
    settings = get_settings(tmp_path / "missing.yaml")
    
    assert settings.api_base_url == "https://linksaverbe-production.up.railway.app"
    assert settings.enrichment.reader_base_url == "https://r.jina.ai"
    assert settings.success_display_seconds == 3.0
    assert settings.jina_api_key is None
    assert settings.credentials_file.name == "credentials.yaml"


def test_yaml_and_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test YAML sections apply and environment overrides them."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "api:\n"
        "  base_url: http://localhost:8000/\n"
        "  timeout: 5\n"
        "enrichment:\n"
        "  timeout: 2.5\n"
        "  max_summary_chars: 4000\n"
        "paths:\n"
        "  credentials_file: ~/tokens.yaml\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("JINA_API_KEY", "jina-key")
    monkeypatch.setenv("LINKSAVER_CREDENTIALS_FILE", str(tmp_path / "creds.yaml"))
    monkeypatch.delenv("LINKSAVER_API_URL", raising=False)
    
    settings = get_settings(config_path)
    
    assert settings.api_base_url == "http://localhost:8000"
    assert settings.api_timeout == 5
    assert settings.enrichment_timeout == 2.5
    assert settings.enrichment.max_summary_chars == 4000
    assert settings.jina_api_key == "jina-key"
    assert settings.credentials_file == tmp_path / "creds.yaml"
    
    monkeypatch.setenv("LINKSAVER_API_URL", "https://staging.example.com")
    assert get_settings(config_path).api_base_url == "https://staging.example.com"


def test_unknown_key_rejected(tmp_path: Path) -> None:
    """Test typos in config sections are reported."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("capture:\n  success_seconds: 5\n", encoding="utf-8")
    
    with pytest.raises(ValueError, match="capture.success_seconds"):
        get_settings(config_path)


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Test an empty YAML file yields no overrides."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")
    
    assert load_config(config_path) == {}


def test_settings_instances_are_independent() -> None:
    """Test config sections are not shared between instances."""
    first = Settings()
    first.api.base_url = "http://changed"
    
    assert Settings().api.base_url != "http://changed"
