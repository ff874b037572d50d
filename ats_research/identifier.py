"""
ATS identification for a discovered careers page
"""

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

from config import settings
from utils.url_utils import resolve_link
from .exceptions import FetchError
from .fetcher import HttpFetcher
from .fingerprints import match_by_html, match_by_url
from .locator import CareersPage, find_ats_links

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identification:
    """
    Outcome of ATS identification

    page is the page downstream counting should use. When the careers page
    linked out to an ATS board, page is that board and origin is the
    careers page it was linked from.
    """
    ats_name: Optional[str]
    page: CareersPage
    source: Optional[str] = None  # 'url' | 'html' | 'outbound-link'
    origin: Optional[CareersPage] = None


class AtsIdentifier:
    """Apply the fingerprint table to a careers page and follow outbound ATS links"""

    def __init__(self, fetcher: Optional[HttpFetcher] = None, page_timeout: Optional[float] = None):
        self.fetcher = fetcher or HttpFetcher()
        self.page_timeout = page_timeout or settings.page_timeout_seconds

    def identify(self, page: CareersPage) -> Identification:
        ats_name = match_by_url(page.url)
        if ats_name:
            logger.info(f"ATS detected from URL: {ats_name}")
            return Identification(ats_name=ats_name, page=page, source='url')

        ats_name = match_by_html(page.html)
        result = Identification(ats_name=ats_name, page=page, source='html' if ats_name else None)

        ats_url = self._first_outbound_ats_link(page)
        if ats_url:
            logger.info(f"Careers page links out to ATS board: {ats_url}")
            board = self._load_board(ats_url, page)
            result = Identification(
                ats_name=(match_by_url(board.url) or match_by_url(ats_url)
                          or match_by_html(board.html) or ats_name),
                page=board,
                source='outbound-link',
                origin=page,
            )

        if result.ats_name:
            logger.info(f"ATS detected ({result.source}): {result.ats_name}")
        else:
            logger.info(f"No ATS fingerprint on {page.url}")
        return result

    def _first_outbound_ats_link(self, page: CareersPage) -> Optional[str]:
        if not page.html:
            return None
        soup = BeautifulSoup(page.html, 'html.parser')
        for link in find_ats_links(soup):
            url = resolve_link(page.url, link)
            if url:
                return url
        return None

    def _load_board(self, ats_url: str, page: CareersPage) -> CareersPage:
        """
        Fetch the ATS board; if that fails keep its URL (for slug extraction)
        and the linking page's HTML (for HTML counting)
        """
        try:
            response = self.fetcher.fetch(ats_url, self.page_timeout)
        except FetchError as e:
            logger.warning(f"ATS board fetch failed: {e}")
            return CareersPage(url=ats_url, html=page.html)

        if not response.ok:
            logger.warning(f"ATS board returned {response.status_code}: {ats_url}")
            return CareersPage(url=ats_url, html=page.html)
        return CareersPage(url=response.url, html=response.text)
