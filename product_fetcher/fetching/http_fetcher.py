"""
HTML Fetcher

Thin HTTP client that downloads product pages.
Handles browser-like headers, timeouts and retries on transient errors.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from ..common.config_loader import load_fetcher_settings
from ..common.errors import FetchUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Status code and body of a fetched page."""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HtmlFetcher:
    """
    Downloads product page HTML.

    Handles:
    - Browser-like request headers
    - Timeouts
    - Retries with backoff on 429/5xx responses

    Usage:
        with HtmlFetcher() as fetcher:
            result = fetcher.fetch("https://www.amazon.com/dp/B000000000")
            if result.ok:
                html = result.body
    """

    RETRYABLE_STATUS_CODES = {429, 502, 503, 504}

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds (default from fetcher.yaml)
            max_retries: Attempts per URL (default from fetcher.yaml)
            headers: Request headers (default from fetcher.yaml)
            session: Optional requests session to reuse
        """
        if timeout is None or max_retries is None or headers is None:
            settings = load_fetcher_settings()
            timeout = settings['timeout'] if timeout is None else timeout
            max_retries = settings['max_retries'] if max_retries is None else max_retries
            headers = settings['headers'] if headers is None else headers

        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.backoff_base = 1.0

        self.session = session or requests.Session()
        self.session.headers.update(headers)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def fetch(self, url: str) -> FetchResult:
        """
        Fetch a page.

        Args:
            url: Page URL

        Returns:
            FetchResult; non-2xx responses are returned, not raised

        Raises:
            FetchUnavailable: On network errors, timeouts, or when retries
                are exhausted on a retryable status
        """
        last_status = None

        for attempt in range(self.max_retries):
            try:
                logger.info("Fetching %s", url)
                response = self.session.get(url, timeout=self.timeout)
            except requests.exceptions.Timeout as e:
                raise FetchUnavailable(url, f"timed out after {self.timeout}s") from e
            except requests.exceptions.RequestException as e:
                raise FetchUnavailable(url, str(e)) from e

            if response.status_code in self.RETRYABLE_STATUS_CODES:
                last_status = response.status_code
                if attempt + 1 < self.max_retries:
                    retry_after = self._retry_after(response, attempt)
                    logger.warning("HTTP %d on %s, retry %d/%d in %.1fs...",
                                   response.status_code, url, attempt + 1,
                                   self.max_retries, retry_after)
                    time.sleep(retry_after)
                continue

            logger.info("HTTP %d, %d characters", response.status_code, len(response.text))
            return FetchResult(status_code=response.status_code, body=response.text)

        raise FetchUnavailable(
            url, f"max retries ({self.max_retries}) exceeded, last status {last_status}"
        )

    def _retry_after(self, response, attempt: int) -> float:
        try:
            return float(response.headers.get("Retry-After", self.backoff_base * 2 ** attempt))
        except (TypeError, ValueError):
            return self.backoff_base * 2 ** attempt
