# wikisummary/lookup.py
import logging
from typing import Optional

from .config import Settings
from .errors import ArticleNotFound, FetchError, ParseError
from .extractor import summary_text
from .formatter import Formatter
from .models import LookupOutcome
from .presenter import InsertPresenter, NewSurfacePresenter, Presenter
from .surfaces import SurfaceRegistry
from .wikipedia_service import WikipediaService, build_query_url

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No article found"
PARSE_ERROR_MESSAGE = "Could not parse response"


class SummaryLookup:
    def __init__(
        self,
        settings: Settings,
        wiki: WikipediaService,
        registry: SurfaceRegistry,
        formatter: Optional[Formatter] = None,
    ):
        self.settings = settings
        self.wiki = wiki
        self.registry = registry
        self.formatter = formatter or Formatter(settings.fill_column)

    def presenter_for(self, into: Optional[str]) -> Presenter:
        if into is None:
            return NewSurfacePresenter(self.registry, self.formatter)
        return InsertPresenter(self.registry, self.formatter, target=into)

    async def lookup(
        self, title: str, into: Optional[str] = None, language: Optional[str] = None
    ) -> LookupOutcome:
        """
        Fetch the summary of `title` and show it in a new surface, or insert
        it into the surface named `into`.

        Fetch, parse and not-found failures come back as a non-ok outcome and
        leave every surface untouched. A read-only or unknown target raises.
        """
        url = build_query_url(title, language or self.settings.language)
        presenter = self.presenter_for(into)

        try:
            _, body = await self.wiki.fetch(url)
            text = summary_text(body)
        except FetchError as e:
            logger.warning("Lookup of %r failed: %s", title, e)
            return LookupOutcome(
                title=title, url=url, status="fetch_failed", message=f"Lookup failed: {e}"
            )
        except ParseError:
            logger.warning("Unparseable response for %r", title)
            return LookupOutcome(
                title=title, url=url, status="parse_error", message=PARSE_ERROR_MESSAGE
            )
        except ArticleNotFound:
            logger.info("No article for %r", title)
            return LookupOutcome(
                title=title, url=url, status="not_found", message=NOT_FOUND_MESSAGE
            )

        surface = presenter.present(title, text)
        return LookupOutcome(
            title=title,
            url=url,
            status="ok",
            message=f"Summary shown in {surface.name}",
            surface=surface.name,
            text=surface.text,
        )
