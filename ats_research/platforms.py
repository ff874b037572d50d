"""
Platform-specific job board API integrations
Supports: Greenhouse, Lever, Ashby, SmartRecruiters, Recruitee
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple
from urllib.parse import quote

from config import settings
from .exceptions import FetchError, ParseError
from .fetcher import HttpFetcher

logger = logging.getLogger(__name__)


def _jobs_field(key: str) -> Callable[[Any], Optional[int]]:
    def count(data: Any) -> Optional[int]:
        if isinstance(data, dict) and isinstance(data.get(key), list):
            return len(data[key])
        return None
    return count


def _bare_array(data: Any) -> Optional[int]:
    return len(data) if isinstance(data, list) else None


def _smartrecruiters_total(data: Any) -> Optional[int]:
    # {offset, limit, totalFound, content: [...]}; content is paginated
    if not isinstance(data, dict):
        return None
    total = data.get('totalFound')
    if isinstance(total, int) and not isinstance(total, bool) and total >= 0:
        return total
    return _jobs_field('content')(data)


@dataclass(frozen=True)
class JobBoardApi:
    """Public JSON endpoint of one ATS vendor, keyed by board slug"""
    vendor: str
    slug_pattern: re.Pattern
    endpoint: str
    count_jobs: Callable[[Any], Optional[int]]
    always_try_company_slug: bool = False

    def extract_slug(self, careers_url: Optional[str]) -> Optional[str]:
        if not careers_url:
            return None
        match = self.slug_pattern.search(careers_url)
        return match.group(1) if match else None

    def slug_candidates(self, careers_url: Optional[str], company_name: str) -> List[str]:
        """
        Board slugs to try, in order

        Examples:
            boards.greenhouse.io/acme → ['acme', <company>]  (Greenhouse tries both)
            jobs.lever.co/netflix → ['netflix']
            acme.com/careers → [<company>]
        """
        company_slug = (company_name or '').strip().lower()
        slug = self.extract_slug(careers_url)

        candidates = []
        if slug:
            candidates.append(slug)
        if company_slug and (not slug or self.always_try_company_slug) and company_slug not in candidates:
            candidates.append(company_slug)
        return candidates

    def api_url(self, slug: str) -> str:
        return self.endpoint.format(slug=quote(slug, safe=''))


JOB_BOARD_APIS: Tuple[JobBoardApi, ...] = (
    JobBoardApi(
        vendor="Greenhouse",
        slug_pattern=re.compile(
            r"(?:boards|job-boards)\.greenhouse\.io/(?:embed/[a-z_/]+\?for=)?([^/?#&]+)", re.IGNORECASE
        ),
        endpoint="https://boards-api.greenhouse.io/v1/boards/{slug}/jobs",
        count_jobs=_jobs_field('jobs'),
        always_try_company_slug=True,
    ),
    JobBoardApi(
        vendor="Lever",
        slug_pattern=re.compile(r"jobs\.lever\.co/([^/?#]+)", re.IGNORECASE),
        endpoint="https://api.lever.co/v0/postings/{slug}?mode=json",
        count_jobs=_bare_array,
    ),
    JobBoardApi(
        vendor="Ashby",
        slug_pattern=re.compile(r"jobs\.ashbyhq\.com/([^/?#]+)", re.IGNORECASE),
        endpoint="https://api.ashbyhq.com/posting-api/job-board/{slug}",
        count_jobs=_jobs_field('jobs'),
    ),
    JobBoardApi(
        vendor="SmartRecruiters",
        slug_pattern=re.compile(r"(?:jobs|careers)\.smartrecruiters\.com/([^/?#]+)", re.IGNORECASE),
        endpoint="https://api.smartrecruiters.com/v1/companies/{slug}/postings",
        count_jobs=_smartrecruiters_total,
    ),
    JobBoardApi(
        vendor="Recruitee",
        slug_pattern=re.compile(r"//([^./?#]+)\.recruitee\.com", re.IGNORECASE),
        endpoint="https://{slug}.recruitee.com/api/offers/",
        count_jobs=_jobs_field('offers'),
    ),
)


def find_job_board_api(vendor: Optional[str]) -> Optional[JobBoardApi]:
    for api in JOB_BOARD_APIS:
        if api.vendor == vendor:
            return api
    return None


class JobBoardApiClient:
    """Count open roles through a vendor's public job board API"""

    def __init__(self, fetcher: Optional[HttpFetcher] = None, timeout: Optional[float] = None):
        self.fetcher = fetcher or HttpFetcher()
        self.timeout = timeout or settings.api_timeout_seconds

    def count_jobs(self, vendor: Optional[str], careers_url: Optional[str], company_name: str) -> Optional[int]:
        """
        Returns:
            Number of jobs on the board (0 is a real answer), or None when
            the vendor has no API or no slug produced a usable response
        """
        api = find_job_board_api(vendor)
        if api is None:
            return None

        for slug in api.slug_candidates(careers_url, company_name):
            count = self._count_board(api, slug)
            if count is not None:
                logger.info(f"✅ {api.vendor}: Found {count} jobs for board '{slug}'")
                return count

        logger.info(f"No {api.vendor} API answer for {careers_url}")
        return None

    def _count_board(self, api: JobBoardApi, slug: str) -> Optional[int]:
        url = api.api_url(slug)
        logger.info(f"Fetching {api.vendor} jobs: {url}")
        try:
            response = self.fetcher.fetch_json(url, self.timeout)
            if not response.ok:
                logger.warning(f"{api.vendor} API returned {response.status_code}")
                return None
            count = api.count_jobs(response.json())
        except (FetchError, ParseError) as e:
            logger.warning(f"{api.vendor} API error: {e}")
            return None

        if count is None:
            logger.warning(f"{api.vendor} API returned an unexpected shape")
        return count
