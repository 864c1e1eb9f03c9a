"""Scenario configuration using pydantic-settings."""
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict


class BrowserConfig(BaseModel):
    """Browser launch configuration."""

    headless: bool = True
    ignore_https_errors: bool = True
    slow_mo: int = 0
    timeout: int = 30000
    viewport_width: int = 1920
    viewport_height: int = 1080
    args: list[str] = [
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--start-maximized",
    ]


class CasConfig(BaseModel):
    """CAS server endpoint and test credentials."""

    login_url: str = "https://localhost:8443/cas/login"
    username: str = "casuser"
    password: str = "Mellon"


class ArtifactConfig(BaseModel):
    """Where failure artifacts are written."""

    screenshot_dir: Path = Path("data/screenshots")
    failure_log: Path = Path("data/failures.jsonl")
    screenshot_on_failure: bool = True


class Settings(BaseSettings):
    """Scenario settings loaded from YAML or environment."""

    model_config = SettingsConfigDict(
        env_prefix="CAS_SCENARIO_",
        env_nested_delimiter="__",
    )

    browser: BrowserConfig = BrowserConfig()
    cas: CasConfig = CasConfig()
    artifacts: ArtifactConfig = ArtifactConfig()

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        ``CAS_SCENARIO_*`` environment variables take precedence over values
        in the file. A missing file yields defaults plus environment.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Settings instance with loaded configuration.
        """
        if not path.exists():
            return cls()
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**_merge(data, EnvSettingsSource(cls)()))


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay overrides onto base, returning a new dict."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
