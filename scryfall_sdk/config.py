"""YAML configuration for the Scryfall clients."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("scryfall.yaml")
DEFAULT_BASE_URL = "https://api.scryfall.com"


@dataclass
class ClientConfig:
    """Settings shared by the async and blocking clients.

    ``user_agent=None`` keeps each client's own default; ``timeout=None``
    keeps the transport's default.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: Optional[str] = None
    timeout: Optional[float] = None


def load_config(path: Optional[Path] = None, base_url: Optional[str] = None) -> ClientConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.info("No config file at %s, using defaults", config_path)
        config = ClientConfig()
    else:
        logger.info("Loading config from %s", config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        config = _parse_config(raw) if raw else ClientConfig()

    # CLI base URL override
    if base_url:
        config.base_url = base_url

    _validate_config(config)
    return config


def _parse_config(raw: Dict[str, Any]) -> ClientConfig:
    """Parse a raw YAML mapping; settings may sit under ``client:`` or at the top level."""
    if not isinstance(raw, dict):
        raise ValueError("Config error: expected a mapping at the top level")
    section = raw.get("client", raw)
    if not isinstance(section, dict):
        raise ValueError("Config error: 'client' must be a mapping")

    config = ClientConfig()
    if "base_url" in section:
        config.base_url = str(section["base_url"])
    if section.get("user_agent") is not None:
        config.user_agent = str(section["user_agent"])
    if section.get("timeout") is not None:
        try:
            config.timeout = float(section["timeout"])
        except (TypeError, ValueError):
            raise ValueError(
                f"Config error: timeout must be a number, got {section['timeout']!r}"
            ) from None
    return config


def _validate_config(config: ClientConfig) -> None:
    """Validate config and raise on errors."""
    parsed = urlparse(config.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(
            f"Config error: base_url must be an http(s) URL, got {config.base_url!r}"
        )
    if parsed.query or parsed.fragment:
        raise ValueError("Config error: base_url must not carry a query or fragment")
    config.base_url = config.base_url.rstrip("/")

    if config.timeout is not None and config.timeout <= 0:
        raise ValueError(f"Config error: timeout must be positive, got {config.timeout}")

    logger.info(
        "Config validated: base_url=%s, timeout=%s",
        config.base_url,
        config.timeout if config.timeout is not None else "default",
    )
