"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def extract_domain(url: str) -> str:
    """Extract the display host from a URL.

    Args:
        url: The URL to extract the host from.

    Returns:
        The host name (without 'www.' prefix), or "Unknown" if extraction fails.
    """
    try:
        parsed = urlparse(url)
        domain = parsed.netloc
    except ValueError:
        return "Unknown"
    if not domain:
        logger.warning("Could not get domain from url %s", url)
        return "Unknown"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
