"""Configuration management."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml


@dataclass
class ApiConfig:
    """Remote bookmark service settings."""
    base_url: str = "https://linksaverbe-production.up.railway.app"
    timeout: float = 30.0


@dataclass
class EnrichmentConfig:
    """Content extraction (Jina Reader) settings."""
    reader_base_url: str = "https://r.jina.ai"
    timeout: float = 15.0
    accept: str = "text/markdown"
    max_summary_chars: Optional[int] = None


@dataclass
class CaptureConfig:
    """Capture pipeline settings."""
    success_display_seconds: float = 3.0


@dataclass
class PathsConfig:
    """Path settings."""
    credentials_file: Path = field(
        default_factory=lambda: Path.home() / ".config" / "linksaver" / "credentials.yaml"
    )


@dataclass
class Settings:
    """Application settings."""
    
    # API keys (from environment only)
    jina_api_key: Optional[str] = None
    
    # Config sections
    api: ApiConfig = field(default_factory=ApiConfig)
    enrichment: EnrichmentConfig = field(default_factory=EnrichmentConfig)
    capture: CaptureConfig = field(default_factory=CaptureConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    
    @property
    def api_base_url(self) -> str:
        return self.api.base_url.rstrip("/")
    
    @property
    def api_timeout(self) -> float:
        return self.api.timeout
    
    @property
    def enrichment_timeout(self) -> float:
        return self.enrichment.timeout
    
    @property
    def success_display_seconds(self) -> float:
        return self.capture.success_display_seconds
    
    @property
    def credentials_file(self) -> Path:
        return self.paths.credentials_file


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _apply_section(section: Any, values: dict, section_name: str) -> None:
    """Copy YAML values onto a config dataclass, rejecting unknown keys."""
    known = {f.name for f in fields(section)}
    for key, value in values.items():
        if key not in known:
            raise ValueError(f"Unknown setting '{section_name}.{key}'")
        setattr(section, key, value)


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    
    settings = Settings(jina_api_key=os.getenv("JINA_API_KEY") or None)
    
    # Apply YAML config
    if "api" in config:
        _apply_section(settings.api, config["api"], "api")
    
    if "enrichment" in config:
        _apply_section(settings.enrichment, config["enrichment"], "enrichment")
    
    if "capture" in config:
        _apply_section(settings.capture, config["capture"], "capture")
    
    if "paths" in config:
        _apply_section(settings.paths, config["paths"], "paths")
        settings.paths.credentials_file = Path(settings.paths.credentials_file).expanduser()
    
    # Environment overrides
    api_url = os.getenv("LINKSAVER_API_URL")
    if api_url:
        settings.api.base_url = api_url
    
    credentials_file = os.getenv("LINKSAVER_CREDENTIALS_FILE")
    if credentials_file:
        settings.paths.credentials_file = Path(credentials_file).expanduser()
    
    return settings
