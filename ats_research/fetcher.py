"""
Bounded-time HTTP GET with a browser-like identity.

Every network call in the pipeline goes through HttpFetcher.fetch. A call
either returns a FetchResponse (any status code) or raises FetchError; it
never blocks longer than the timeout it was given. No retries, no caching.

The GET (DNS, connect, redirects and body) runs on a worker thread and the
caller waits on it for at most the call's budget. A download still running
when the budget is spent is cancelled: its response is closed so the worker
stops at its next socket read.
"""

import json
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import requests

from config import settings
from .exceptions import FetchError, ParseError

logger = logging.getLogger(__name__)

HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
JSON_ACCEPT = "application/json"

_CHUNK_SIZE = 16 * 1024


@dataclass(frozen=True)
class FetchResponse:
    """Final (post-redirect) URL, status and decoded body of a GET"""
    url: str
    status_code: int
    text: str = ""
    content_type: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {self.url}: {e}") from e


class _Download:
    """Hand-off between the waiting caller and the worker doing the GET"""

    def __init__(self):
        self._lock = threading.Lock()
        self._response = None
        self.cancelled = False

    def attach(self, response) -> bool:
        with self._lock:
            if self.cancelled:
                return False
            self._response = response
            return True

    def cancel(self):
        with self._lock:
            self.cancelled = True
            response = self._response
        if response is not None:
            response.close()


class HttpFetcher:
    """
    Thin wrapper over requests.get

    Usage:
        fetcher = HttpFetcher()
        response = fetcher.fetch("https://acme.com/careers", timeout=4)
        if response.ok:
            html = response.text
    """

    def __init__(self, user_agent: Optional[str] = None, max_body_bytes: Optional[int] = None):
        self.user_agent = user_agent or settings.user_agent
        self.max_body_bytes = max_body_bytes or settings.max_body_bytes

    def fetch(self, url: str, timeout: float, accept: str = HTML_ACCEPT) -> FetchResponse:
        """
        GET a URL following redirects

        Args:
            url: Absolute http(s) URL
            timeout: Total wall-clock budget in seconds (DNS + connect +
                redirects + body)
            accept: Accept header value

        Raises:
            FetchError: on timeout or any transport failure
        """
        headers = {
            'User-Agent': self.user_agent,
            'Accept': accept,
        }
        deadline = time.monotonic() + timeout
        download = _Download()

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='fetch')
        try:
            future = executor.submit(self._download, url, headers, timeout, deadline, download)
            try:
                response, body = future.result(timeout=max(deadline - time.monotonic(), 0))
            except FuturesTimeout:
                download.cancel()
                raise FetchError(url, f"timed out after {timeout}s") from None
        finally:
            executor.shutdown(wait=False)

        content_type = response.headers.get('Content-Type', '')
        if 'charset' in content_type.lower() and response.encoding:
            encoding = response.encoding
        else:
            encoding = 'utf-8'

        try:
            text = body.decode(encoding, errors='replace')
        except LookupError:
            text = body.decode('utf-8', errors='replace')

        logger.debug(f"GET {url} -> {response.status_code} ({response.url})")
        return FetchResponse(
            url=response.url,
            status_code=response.status_code,
            text=text,
            content_type=content_type,
        )

    def fetch_json(self, url: str, timeout: float) -> FetchResponse:
        """GET a URL asking for JSON"""
        return self.fetch(url, timeout, accept=JSON_ACCEPT)

    def _download(self, url: str, headers: dict, timeout: float, deadline: float,
                  download: _Download) -> Tuple[requests.Response, bytes]:
        try:
            response = requests.get(
                url,
                headers=headers,
                timeout=(timeout, timeout),
                allow_redirects=True,
                stream=True,
            )
        except requests.Timeout as e:
            raise FetchError(url, f"timed out after {timeout}s") from e
        except (requests.RequestException, ValueError) as e:
            raise FetchError(url, str(e)) from e

        try:
            if not download.attach(response):
                raise FetchError(url, "cancelled")
            body = self._read_body(response, url, deadline, timeout, download)
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e
        finally:
            response.close()
        return response, body

    def _read_body(self, response, url: str, deadline: float, timeout: float, download: _Download) -> bytes:
        chunks = []
        size = 0
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            if download.cancelled or time.monotonic() > deadline:
                raise FetchError(url, f"timed out after {timeout}s reading body")
            chunks.append(chunk)
            size += len(chunk)
            if size >= self.max_body_bytes:
                logger.debug(f"Body of {url} truncated at {size} bytes")
                break
        return b"".join(chunks)
