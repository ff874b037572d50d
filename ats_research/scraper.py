"""
HTML-based role counting for career pages

Used when no job board API answers. Tries vendor selectors, then generic
job-board selectors, then counts links that look like job detail pages.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

VENDOR_SELECTORS: Dict[str, Tuple[str, ...]] = {
    "Greenhouse": ('.opening', '[class*="job-post"], [class*="opening"]'),
    "Lever": ('.posting',),
    "Ashby": ('[class*="ashby-job"], [data-testid*="job"]',),
    "SmartRecruiters": (".opening-job, .js-openings li, [class*='job-item']",),
    "Workable": ("[data-ui='job'], li[data-role]",),
}

GENERIC_SELECTORS: Tuple[str, ...] = (
    '[class*="job-listing"]',
    '[class*="job-item"]',
    '[class*="job-card"]',
    '[class*="job-post"]',
    '[class*="position-item"]',
    '[class*="opening"]',
    '[class*="vacancy"]',
    '[class*="career-item"]',
    '[data-job-id]',
    'tr[class*="job"]',
    'li[class*="job"]',
    '.posting',
    '.job',
)

JOB_LINK_RE = re.compile(r"/(jobs?|positions?|openings?|roles?)/", re.IGNORECASE)
APPLY_LINK_RE = re.compile(r"/apply", re.IGNORECASE)


def selector_chain(ats_name: Optional[str] = None) -> List[str]:
    """Vendor selectors first, then the generic ones"""
    return list(VENDOR_SELECTORS.get(ats_name, ())) + list(GENERIC_SELECTORS)


def count_job_links(soup: BeautifulSoup) -> Optional[int]:
    """
    Last resort: distinct (by lower-cased text) links to job detail pages
    with a title-sized anchor text
    """
    titles = set()
    for a in soup.select('a[href]'):
        href = a.get('href') or ''
        text = a.get_text().strip()
        if 5 < len(text) < 200 and (JOB_LINK_RE.search(href) or APPLY_LINK_RE.search(href)):
            titles.add(text.lower())
    return len(titles) if titles else None


def count_jobs_from_html(html: Optional[str], ats_name: Optional[str] = None) -> Optional[int]:
    """
    Estimate the number of listings on a page

    Returns:
        Count from the first selector matching at least one element, else
        the job-link count, else None
    """
    if not html:
        return None

    soup = BeautifulSoup(html, 'html.parser')

    for selector in selector_chain(ats_name):
        count = len(soup.select(selector))
        if count > 0:
            logger.info(f"Counted {count} listings with selector {selector}")
            return count

    count = count_job_links(soup)
    if count:
        logger.info(f"Counted {count} job links")
    return count
