"""
Careers page discovery

Step 1: Probe common career paths on the company's own domain
Step 2: Fetch the homepage
Step 3: Mine homepage links, strict priority:
        A. anchors/iframes pointing at a known ATS
        B. anchors whose href looks like a careers path
        C. anchors whose text is exactly "careers", "jobs", ...
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from config import settings
from utils.url_utils import hostname_of, resolve_link
from .exceptions import FetchError
from .fetcher import FetchResponse, HttpFetcher
from .fingerprints import match_by_url
from .site import NormalizedSite

logger = logging.getLogger(__name__)

CAREERS_PATHS: Tuple[str, ...] = (
    '/careers',
    '/jobs',
    '/join',
    '/join-us',
    '/work-with-us',
    '/open-positions',
    '/opportunities',
    '/hiring',
    '/career',
    '/vacancies',
)

CAREERS_HREF_RE = re.compile(r"/(careers|jobs|open-positions|openings|vacancies)(/|$|\?)", re.IGNORECASE)
CAREERS_LINK_TEXTS = frozenset(['careers', 'jobs', 'work with us', 'join us'])


@dataclass(frozen=True)
class CareersPage:
    """Resolved URL (after redirects) and raw HTML of a job listing page"""
    url: str
    html: str = ""


def is_accepted(response: Optional[FetchResponse], site: NormalizedSite) -> bool:
    """A 2xx page that stayed on the company's domain or landed on a known ATS"""
    if response is None or not response.ok:
        return False
    return hostname_of(response.url) == site.domain or match_by_url(response.url) is not None


def find_ats_links(soup: BeautifulSoup) -> List[str]:
    """href/src values of anchors and iframes that point at a known ATS, in document order"""
    links = []
    for el in soup.select('iframe[src], a[href]'):
        value = el.get('src') or el.get('href') or ''
        if match_by_url(value):
            links.append(value)
    return links


def find_careers_links(soup: BeautifulSoup) -> List[str]:
    """Anchors with a careers-looking href, followed by anchors with careers-looking text"""
    links: List[str] = []
    for a in soup.select('a[href]'):
        href = a.get('href') or ''
        if CAREERS_HREF_RE.search(href) and href not in links:
            links.append(href)

    for a in soup.select('a[href]'):
        href = a.get('href') or ''
        text = a.get_text().strip().lower()
        if text in CAREERS_LINK_TEXTS and len(href) > 1 and href not in links:
            links.append(href)
    return links


class CareersPageLocator:
    """
    Find the one page that lists a company's open roles

    Usage:
        locator = CareersPageLocator(HttpFetcher())
        page = locator.find(normalize_site("stripe.com"))
    """

    def __init__(
        self,
        fetcher: Optional[HttpFetcher] = None,
        careers_paths: Sequence[str] = CAREERS_PATHS,
        probe_timeout: Optional[float] = None,
        page_timeout: Optional[float] = None,
        concurrent: Optional[bool] = None,
        max_workers: Optional[int] = None,
        max_ats_links: Optional[int] = None,
        max_careers_links: Optional[int] = None,
    ):
        self.fetcher = fetcher or HttpFetcher()
        self.careers_paths = tuple(careers_paths)
        self.probe_timeout = probe_timeout or settings.probe_timeout_seconds
        self.page_timeout = page_timeout or settings.page_timeout_seconds
        self.concurrent = settings.probe_concurrently if concurrent is None else concurrent
        self.max_workers = max_workers or settings.max_workers
        self.max_ats_links = max_ats_links or settings.max_ats_links
        self.max_careers_links = max_careers_links or settings.max_careers_links

        # Homepage mining tiers, evaluated in order until one yields a page
        self.link_strategies: Tuple[Callable[[NormalizedSite, BeautifulSoup], Optional[CareersPage]], ...] = (
            self._try_ats_links,
            self._try_careers_links,
        )

    def find(self, site: NormalizedSite) -> Optional[CareersPage]:
        """Return the careers page for a site, or None if nothing was found"""
        logger.info(f"🔍 Looking for careers page of {site.base_url}")

        probe_urls = [f"{site.base_url}{path}" for path in self.careers_paths]
        calls = [(url, self.probe_timeout) for url in probe_urls]
        calls.append((site.base_url, self.page_timeout))

        homepage: Optional[FetchResponse] = None
        with closing(self._fetch_in_order(calls)) as results:
            for index, (url, response, _) in enumerate(results):
                if index < len(probe_urls):
                    if is_accepted(response, site):
                        logger.info(f"✅ Found careers page via path probe: {response.url}")
                        return CareersPage(url=response.url, html=response.text)
                    logger.debug(f"Probe miss: {url}")
                else:
                    homepage = response

        if homepage is None or not homepage.ok:
            logger.warning(f"Homepage unavailable for {site.base_url}, giving up")
            return None

        soup = BeautifulSoup(homepage.text, 'html.parser')
        for strategy in self.link_strategies:
            page = strategy(site, soup)
            if page:
                return page

        logger.warning(f"No careers page found for {site.base_url}")
        return None

    def _try_ats_links(self, site: NormalizedSite, soup: BeautifulSoup) -> Optional[CareersPage]:
        """Tier A: ATS links are trusted without the same-domain check"""
        urls = self._resolve_all(site.base_url, find_ats_links(soup)[:self.max_ats_links])
        if not urls:
            return None

        calls = [(url, self.page_timeout) for url in urls]
        with closing(self._fetch_in_order(calls)) as results:
            for url, response, error in results:
                if error is not None:
                    logger.info(f"✅ Using unreachable ATS link from homepage: {url}")
                    return CareersPage(url=url, html="")
                if response.ok:
                    logger.info(f"✅ Found ATS link on homepage: {response.url}")
                    return CareersPage(url=response.url, html=response.text)
        return None

    def _try_careers_links(self, site: NormalizedSite, soup: BeautifulSoup) -> Optional[CareersPage]:
        """Tiers B and C: careers-looking links, subject to the acceptance test"""
        urls = self._resolve_all(site.base_url, find_careers_links(soup)[:self.max_careers_links])
        if not urls:
            return None

        calls = [(url, self.page_timeout) for url in urls]
        with closing(self._fetch_in_order(calls)) as results:
            for url, response, _ in results:
                if is_accepted(response, site):
                    logger.info(f"✅ Found careers link on homepage: {response.url}")
                    return CareersPage(url=response.url, html=response.text)
        return None

    @staticmethod
    def _resolve_all(base_url: str, links: List[str]) -> List[str]:
        urls = []
        for link in links:
            url = resolve_link(base_url, link)
            if url:
                urls.append(url)
        return urls

    def _attempt(self, url: str, timeout: float) -> Tuple[Optional[FetchResponse], Optional[FetchError]]:
        try:
            return self.fetcher.fetch(url, timeout), None
        except FetchError as e:
            logger.debug(f"Fetch failed: {e}")
            return None, e

    def _fetch_in_order(
        self, calls: List[Tuple[str, float]]
    ) -> Iterator[Tuple[str, Optional[FetchResponse], Optional[FetchError]]]:
        """
        Yield (url, response, error) for each call in list order

        Sequential mode fetches lazily so the caller can stop early.
        Concurrent mode starts every call up front; results are still
        yielded in list order, and unfinished calls are abandoned once the
        caller stops iterating.
        """
        if not self.concurrent or len(calls) < 2:
            for url, timeout in calls:
                response, error = self._attempt(url, timeout)
                yield url, response, error
            return

        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(calls)))
        try:
            futures = [executor.submit(self._attempt, url, timeout) for url, timeout in calls]
            for (url, _), future in zip(calls, futures):
                response, error = future.result()
                yield url, response, error
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
