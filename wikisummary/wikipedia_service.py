# wikisummary/wikipedia_service.py
import logging
import urllib.parse
from typing import Optional, Tuple

import httpx

from .errors import FetchError

logger = logging.getLogger(__name__)

QUERY_PREFIX = "https://{lang}.wikipedia.org/w/api.php?continue=&action=query&titles="
QUERY_SUFFIX = "&prop=extracts&exintro=&explaintext=&format=json&redirects"
# Wikipedia subdomains: "en", "simple", "zh-yue", "be-tarask"
LANGUAGE_PATTERN = r"^[a-z][a-z0-9-]{1,11}$"


def build_query_url(title: str, language: str = "en") -> str:
    """
    Build the MediaWiki extracts query for a title.
    Spaces become underscores before percent-encoding; the language code
    goes into the host unescaped, so it must come from configuration.
    """
    encoded = urllib.parse.quote(title.replace(" ", "_"), safe="")
    return QUERY_PREFIX.format(lang=language) + encoded + QUERY_SUFFIX


class WikipediaService:
    def __init__(
        self,
        user_agent: str = "WikiSummary/1.0",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.headers = {"User-Agent": user_agent}
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> Tuple[int, bytes]:
        """
        Issue one GET and return (status, body). The body excludes the
        response headers. Raises FetchError for transport failures and
        non-2xx statuses; nothing is retried.
        """
        async with httpx.AsyncClient(
            timeout=self.timeout, headers=self.headers, transport=self.transport
        ) as client:
            try:
                r = await client.get(url)
            except httpx.TimeoutException as e:
                raise FetchError(f"timed out after {self.timeout}s") from e
            except httpx.HTTPError as e:
                raise FetchError(str(e) or e.__class__.__name__) from e

        if not r.is_success:
            logger.warning("GET %s returned %s", url, r.status_code)
            raise FetchError(f"HTTP {r.status_code}", status=r.status_code)

        logger.debug("GET %s returned %d bytes", url, len(r.content))
        return r.status_code, r.content
