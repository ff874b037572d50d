"""
URL helpers shared by the research pipeline.
"""

import logging
import re
from typing import Optional
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)

_HOST_LABEL_RE = re.compile(r"^[a-z0-9_]([a-z0-9_\-]*[a-z0-9_])?$", re.IGNORECASE)


def strip_www(hostname: str) -> str:
    """Lower-case a hostname and drop a leading 'www.'"""
    hostname = (hostname or "").lower()
    if hostname.startswith('www.'):
        hostname = hostname[4:]
    return hostname


def is_valid_hostname(hostname: Optional[str]) -> bool:
    if not hostname or len(hostname) > 253:
        return False
    try:
        ascii_host = hostname.encode('idna').decode('ascii')
    except UnicodeError:
        return False
    return all(_HOST_LABEL_RE.match(label) for label in ascii_host.rstrip('.').split('.'))


def raw_hostname(url: str) -> Optional[str]:
    """Hostname of an absolute URL as parsed, or None if missing or malformed"""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return None
    return hostname if is_valid_hostname(hostname) else None


def hostname_of(url: str) -> Optional[str]:
    """Hostname of an absolute URL without 'www.', or None if it has none"""
    hostname = raw_hostname(url)
    return strip_www(hostname) if hostname else None


def resolve_link(base_url: str, href: str) -> Optional[str]:
    """
    Resolve a possibly relative link against base_url

    Returns None for links that cannot become an absolute http(s) URL
    (mailto:, javascript:, malformed hosts ...).
    """
    href = (href or "").strip()
    if not href:
        return None
    try:
        full_url = urljoin(base_url, href)
        parsed = urlparse(full_url)
    except ValueError:
        logger.debug(f"Skipping malformed link: {href}")
        return None
    if parsed.scheme not in ('http', 'https') or not is_valid_hostname(parsed.hostname):
        return None
    return full_url
