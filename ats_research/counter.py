"""
Live role counting: job board APIs first, page HTML second
"""

import logging
from typing import Optional

from .fetcher import HttpFetcher
from .identifier import Identification
from .platforms import JobBoardApiClient
from .scraper import count_jobs_from_html

logger = logging.getLogger(__name__)


class RoleCounter:
    """
    Usage:
        counter = RoleCounter(HttpFetcher())
        live_roles = counter.count(identification, "Stripe")
    """

    def __init__(self, fetcher: Optional[HttpFetcher] = None, api_client: Optional[JobBoardApiClient] = None):
        self.api_client = api_client or JobBoardApiClient(fetcher)

    def count(self, identification: Identification, company_name: str) -> Optional[int]:
        """
        Returns:
            Non-negative role count, or None when it could not be determined
        """
        ats_name = identification.ats_name

        # LAYER 1: authoritative board API
        if ats_name:
            count = self.api_client.count_jobs(ats_name, identification.page.url, company_name)
            if count is not None:
                return count

        # LAYER 2: HTML of the board, then of the page that linked to it
        pages = [identification.page]
        if identification.origin and identification.origin.html != identification.page.html:
            pages.append(identification.origin)

        for page in pages:
            count = count_jobs_from_html(page.html, ats_name)
            if count is not None:
                return count

        logger.info(f"Could not determine role count for {identification.page.url}")
        return None
