"""
Prospect research pipeline

Step 1: Normalize the submitted URL
Step 2: Locate the careers page (path probes → homepage link mining)
Step 3: Identify the ATS (URL → HTML → outbound ATS link)
Step 4: Count live roles (board API → HTML selectors → job links)
Step 5: Build the recruiter X-ray search URL
"""

import logging
from typing import Optional

from models.responses import ResearchResult
from services.recruiter_search import build_recruiter_search_url
from .counter import RoleCounter
from .fetcher import HttpFetcher
from .fingerprints import UNKNOWN_ATS
from .identifier import AtsIdentifier
from .locator import CareersPageLocator
from .site import normalize_site

logger = logging.getLogger(__name__)


class ProspectResearcher:
    """
    Usage:
        researcher = ProspectResearcher()
        result = researcher.research("stripe.com")
    """

    def __init__(
        self,
        fetcher: Optional[HttpFetcher] = None,
        locator: Optional[CareersPageLocator] = None,
        identifier: Optional[AtsIdentifier] = None,
        counter: Optional[RoleCounter] = None,
    ):
        fetcher = fetcher or HttpFetcher()
        self.locator = locator or CareersPageLocator(fetcher)
        self.identifier = identifier or AtsIdentifier(fetcher)
        self.counter = counter or RoleCounter(fetcher)

    def research(self, raw_url: str) -> ResearchResult:
        """
        Raises:
            InvalidInputError: if raw_url is blank or not an http(s) URL
        """
        site = normalize_site(raw_url)
        logger.info(f"🔍 Researching {site.company_name} ({site.base_url})")

        ats_detected = UNKNOWN_ATS
        live_roles = None
        careers_url = None

        careers_page = self.locator.find(site)
        if careers_page:
            identification = self.identifier.identify(careers_page)
            careers_url = identification.page.url
            if identification.ats_name:
                ats_detected = identification.ats_name
            live_roles = self.counter.count(identification, site.company_name)
        else:
            logger.warning(f"No careers page found for {site.company_name}")

        result = ResearchResult(
            company_name=site.company_name,
            website=site.base_url,
            ats_detected=ats_detected,
            live_roles=live_roles,
            linkedin_search_url=build_recruiter_search_url(site.company_name),
            careers_url=careers_url,
        )
        logger.info(f"✅ {site.company_name}: ATS={ats_detected}, live roles={live_roles}, careers={careers_url}")
        return result
