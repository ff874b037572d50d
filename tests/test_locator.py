"""Tests for careers page discovery."""
import pytest

from ats_research.exceptions import FetchError
from ats_research.locator import (
    CAREERS_PATHS,
    CareersPage,
    CareersPageLocator,
    find_ats_links,
    find_careers_links,
    is_accepted,
)
from ats_research.site import normalize_site
from bs4 import BeautifulSoup
from tests.conftest import FakeFetcher, html_page

SITE = normalize_site("https://www.acme.com")
BASE = "https://www.acme.com"


def make_locator(fetcher, concurrent=False):
    return CareersPageLocator(fetcher, concurrent=concurrent, probe_timeout=1, page_timeout=1)


class TestAcceptance:

    def test_same_domain_ignoring_www(self):
        assert is_accepted(html_page(f"{BASE}/careers", final_url="https://acme.com/careers"), SITE)

    def test_redirect_to_known_ats(self):
        assert is_accepted(html_page(f"{BASE}/jobs", final_url="https://jobs.lever.co/acme"), SITE)

    def test_redirect_off_domain_rejected(self):
        assert not is_accepted(html_page(f"{BASE}/jobs", final_url="https://parked-domains.net/"), SITE)

    def test_non_2xx_rejected(self):
        assert not is_accepted(html_page(f"{BASE}/jobs", status_code=500), SITE)

    def test_missing_response_rejected(self):
        assert not is_accepted(None, SITE)


class TestLinkMining:

    def test_ats_links_from_anchors_and_iframes_in_document_order(self):
        soup = BeautifulSoup(
            '<a href="/about">About</a>'
            '<iframe src="https://boards.greenhouse.io/embed/job_board?for=acme"></iframe>'
            '<a href="https://jobs.lever.co/acme">Jobs</a>',
            'html.parser',
        )
        assert find_ats_links(soup) == [
            "https://boards.greenhouse.io/embed/job_board?for=acme",
            "https://jobs.lever.co/acme",
        ]

    def test_careers_links_href_before_text(self):
        soup = BeautifulSoup(
            '<a href="/team">Join us</a>'
            '<a href="/company/careers">Careers at Acme</a>'
            '<a href="/openings?dept=eng">Openings</a>'
            '<a href="/careerspage">Nope</a>'
            '<a href="/company/careers">Careers</a>',
            'html.parser',
        )
        assert find_careers_links(soup) == ["/company/careers", "/openings?dept=eng", "/team"]

    def test_text_link_needs_real_href(self):
        soup = BeautifulSoup('<a href="#">Careers</a><a href="/work">  WORK WITH US </a>', 'html.parser')
        assert find_careers_links(soup) == ["/work"]


@pytest.mark.parametrize("concurrent", [False, True])
class TestCareersPageLocator:

    def test_first_accepted_path_wins(self, concurrent):
        fetcher = FakeFetcher({
            f"{BASE}/jobs": html_page(f"{BASE}/jobs", "<h1>Jobs</h1>"),
            f"{BASE}/hiring": html_page(f"{BASE}/hiring", "<h1>Hiring</h1>"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page == CareersPage(url=f"{BASE}/jobs", html="<h1>Jobs</h1>")

    def test_path_order_beats_response_order(self, concurrent):
        fetcher = FakeFetcher({
            f"{BASE}/careers": html_page(f"{BASE}/careers", final_url="https://elsewhere.com/"),
            f"{BASE}/vacancies": html_page(f"{BASE}/vacancies", "v"),
            f"{BASE}/join": html_page(f"{BASE}/join", "j"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == f"{BASE}/join"

    def test_probe_redirecting_to_ats_is_accepted(self, concurrent):
        fetcher = FakeFetcher({
            f"{BASE}/careers": html_page(f"{BASE}/careers", "board", final_url="https://jobs.ashbyhq.com/acme"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == "https://jobs.ashbyhq.com/acme"

    def test_probe_failures_do_not_abort_search(self, concurrent):
        fetcher = FakeFetcher({
            f"{BASE}/careers": FetchError(f"{BASE}/careers", "timed out"),
            f"{BASE}/jobs": html_page(f"{BASE}/jobs", "ok"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == f"{BASE}/jobs"

    def test_homepage_iframe_to_greenhouse(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(BASE, '<iframe src="https://boards.greenhouse.io/acme"></iframe>'),
            "https://boards.greenhouse.io/acme": html_page("https://boards.greenhouse.io/acme", "<div class='opening'></div>"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == "https://boards.greenhouse.io/acme"
        assert "opening" in page.html

    def test_unreachable_ats_link_is_trusted_with_empty_html(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(BASE, '<a href="https://jobs.lever.co/acme">Jobs</a>'),
            "https://jobs.lever.co/acme": FetchError("https://jobs.lever.co/acme", "timed out"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page == CareersPage(url="https://jobs.lever.co/acme", html="")

    def test_ats_link_with_error_status_is_skipped(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(
                BASE,
                '<a href="https://jobs.lever.co/old">Old</a><a href="https://jobs.lever.co/acme">Jobs</a>',
            ),
            "https://jobs.lever.co/old": html_page("https://jobs.lever.co/old", status_code=404),
            "https://jobs.lever.co/acme": html_page("https://jobs.lever.co/acme", "lever board"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == "https://jobs.lever.co/acme"

    def test_careers_href_link(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(BASE, '<a href="/company/careers/">Work here</a>'),
            f"{BASE}/company/careers/": html_page(f"{BASE}/company/careers/", "roles"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == f"{BASE}/company/careers/"

    def test_careers_text_link(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(BASE, '<nav><a href="/people">Join us</a></nav>'),
            f"{BASE}/people": html_page(f"{BASE}/people", "people"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == f"{BASE}/people"

    def test_off_domain_careers_link_rejected(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(BASE, '<a href="https://other.com/jobs">Jobs</a>'),
            "https://other.com/jobs": html_page("https://other.com/jobs", "not ours"),
        })
        assert make_locator(fetcher, concurrent).find(SITE) is None

    def test_malformed_links_are_skipped(self, concurrent):
        fetcher = FakeFetcher({
            BASE: html_page(
                BASE,
                '<a href="http://[broken/careers">Careers</a><a href="/jobs/">Jobs</a>',
            ),
            f"{BASE}/jobs/": html_page(f"{BASE}/jobs/", "jobs"),
        })
        page = make_locator(fetcher, concurrent).find(SITE)
        assert page.url == f"{BASE}/jobs/"

    def test_nothing_found(self, concurrent):
        fetcher = FakeFetcher({BASE: html_page(BASE, "<p>Welcome</p>")})
        assert make_locator(fetcher, concurrent).find(SITE) is None

    def test_homepage_failure_is_not_found(self, concurrent):
        fetcher = FakeFetcher({BASE: FetchError(BASE, "DNS failure")})
        assert make_locator(fetcher, concurrent).find(SITE) is None


class TestSequentialMode:

    def test_stops_probing_after_first_acceptance(self):
        fetcher = FakeFetcher({f"{BASE}/careers": html_page(f"{BASE}/careers", "ok")})
        make_locator(fetcher, concurrent=False).find(SITE)
        assert fetcher.calls == [f"{BASE}/careers"]

    def test_homepage_fetched_after_all_probes(self):
        fetcher = FakeFetcher()
        make_locator(fetcher, concurrent=False).find(SITE)
        assert fetcher.calls == [f"{BASE}{path}" for path in CAREERS_PATHS] + [BASE]
