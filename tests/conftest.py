"""Shared fixtures: an in-memory fetcher keyed by URL."""

import json
from typing import Dict, List, Union

import pytest

from ats_research.fetcher import FetchResponse, HTML_ACCEPT, JSON_ACCEPT


def html_page(url: str, html: str = "<html></html>", status_code: int = 200, final_url: str = None) -> FetchResponse:
    return FetchResponse(
        url=final_url or url,
        status_code=status_code,
        text=html,
        content_type="text/html; charset=utf-8",
    )


def json_page(url: str, data, status_code: int = 200) -> FetchResponse:
    return FetchResponse(
        url=url,
        status_code=status_code,
        text=json.dumps(data),
        content_type="application/json",
    )


class FakeFetcher:
    """
    Stands in for HttpFetcher. Unknown URLs answer 404; an Exception
    registered for a URL is raised instead of returning a response.
    """

    def __init__(self, routes: Dict[str, Union[FetchResponse, Exception]] = None):
        self.routes = dict(routes or {})
        self.calls: List[str] = []

    def fetch(self, url: str, timeout: float, accept: str = HTML_ACCEPT) -> FetchResponse:
        self.calls.append(url)
        entry = self.routes.get(url)
        if entry is None:
            return FetchResponse(url=url, status_code=404, text="Not Found")
        if isinstance(entry, Exception):
            raise entry
        return entry

    def fetch_json(self, url: str, timeout: float) -> FetchResponse:
        return self.fetch(url, timeout, accept=JSON_ACCEPT)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
