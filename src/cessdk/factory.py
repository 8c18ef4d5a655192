"""Client construction from loaded settings."""

from __future__ import annotations

import logging

from .client import CESClient, ProxyConfig
from .settings import Settings

logger = logging.getLogger(__name__)


def create_client_from_settings(settings: Settings) -> CESClient:
    """Create a CESClient from settings.

    Raises:
        ValueError: If no API key is configured
    """
    if settings.api_key is None:
        raise ValueError("API key is not configured (set api_key in the config file or CES_API_KEY)")

    proxy_config = None
    if settings.proxy.enabled:
        proxy_config = ProxyConfig(
            url=settings.proxy.url,
            username=settings.proxy.username,
            password=settings.proxy.password.get_secret_value() if settings.proxy.password else None,
        )

    client = CESClient(
        settings.api_key.get_secret_value(),
        settings.base_url,
        proxy=proxy_config,
        user_agent=settings.user_agent,
    )
    logger.debug("Initialized client for %s", client.base_url)
    return client
