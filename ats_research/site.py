"""
Normalization of the user-submitted website
"""

import re
from dataclasses import dataclass
from urllib.parse import urlparse

from utils.url_utils import is_valid_hostname, raw_hostname, strip_www
from .exceptions import InvalidInputError

_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+.\-]*)://", re.IGNORECASE)


@dataclass(frozen=True)
class NormalizedSite:
    """Scheme + hostname of the submitted website and the name derived from it"""
    base_url: str
    company_name: str
    domain: str  # hostname without 'www.'


def normalize_url(raw_url: str) -> str:
    """
    Trim the input and add https:// if no protocol was given

    Raises:
        InvalidInputError: if the input carries a scheme other than http/https
    """
    url = raw_url.strip()
    match = _SCHEME_RE.match(url)
    if not match:
        return f'https://{url}'
    if match.group(1).lower() not in ('http', 'https'):
        raise InvalidInputError("Invalid URL format")
    return url


def extract_company_name(url: str) -> str:
    """
    Capitalized first DNS label of the URL's hostname

    Examples:
        https://www.stripe.com/about → 'Stripe'
        https://jobs.primary.vc → 'Jobs'
        bad url → 'Unknown'
    """
    hostname = raw_hostname(url)
    if not hostname:
        return "Unknown"
    first_label = strip_www(hostname).split('.')[0]
    if not first_label:
        return "Unknown"
    return first_label[:1].upper() + first_label[1:]


def normalize_site(raw_url: str) -> NormalizedSite:
    """
    Turn user input into the base URL and company name used by the pipeline

    Raises:
        InvalidInputError: for blank input or input that does not parse to
        an http(s) URL with a hostname
    """
    if not isinstance(raw_url, str) or not raw_url.strip():
        raise InvalidInputError("Please provide a valid URL")

    url = normalize_url(raw_url)
    try:
        parsed = urlparse(url)
        scheme = parsed.scheme.lower()
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidInputError("Invalid URL format") from e

    if scheme not in ('http', 'https') or not is_valid_hostname(hostname):
        raise InvalidInputError("Invalid URL format")

    return NormalizedSite(
        base_url=f"{scheme}://{hostname}",
        company_name=extract_company_name(url),
        domain=strip_www(hostname),
    )
