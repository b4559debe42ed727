"""
Document loading over HTTP.
"""

import logging
from typing import Optional

import certifi
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..dom.document import DocumentSnapshot
from ..exceptions import DocumentLoadError
from ..utils.config import Config

logger = logging.getLogger(__name__)


class DocumentLoader:
    """
    Fetches HTML documents and captures them as snapshots.

    The HTTP session is created on first use and released by ``close()``;
    the loader can also be used as a context manager.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Args:
            config: Configuration supplying ``network.timeout``,
                ``network.retries`` and ``network.user_agent``
        """
        self.config = config or Config()
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = self._create_session()
        return self._session

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        retry_strategy = Retry(
            total=int(self.config.get("network.retries", 3)),
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "HEAD"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.verify = certifi.where()
        session.headers.update({
            "User-Agent": self.config.get("network.user_agent"),
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        })

        logger.debug("HTTP session created")
        return session

    def fetch(self, url: str) -> str:
        """
        Fetch the HTML text of a URL.

        Args:
            url: http(s) URL

        Returns:
            The decoded response body

        Raises:
            DocumentLoadError: On connection errors or non-2xx responses
        """
        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.config.get("network.timeout", 30))
            response.raise_for_status()
        except requests.RequestException as e:
            raise DocumentLoadError(url, str(e)) from e

        # Without a declared charset requests assumes ISO-8859-1 for text/*
        if 'charset=' not in response.headers.get('Content-Type', '').lower():
            response.encoding = response.apparent_encoding or 'utf-8'

        return response.text

    def load(self, url: str) -> DocumentSnapshot:
        """Fetch a URL and parse it into a DocumentSnapshot."""
        return DocumentSnapshot.from_html(self.fetch(url), url=url)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.debug("HTTP session closed")

    def __enter__(self) -> 'DocumentLoader':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
