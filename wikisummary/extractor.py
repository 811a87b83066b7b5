# wikisummary/extractor.py
import json
import logging
from typing import Union

from .errors import ArticleNotFound, ParseError
from .models import SummaryResult

logger = logging.getLogger(__name__)


def extract_summary(body: Union[bytes, str]) -> SummaryResult:
    """
    Pull query.pages.<pageid>.extract out of an extracts response.

    The API answers with a single page keyed by its id. If more than one
    page comes back the first one wins.
    """
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        logger.warning("Response body is not JSON: %s", e)
        return SummaryResult(found=False, error="parse")

    if not isinstance(data, dict):
        return SummaryResult(found=False, error="parse")

    query = data.get("query")
    if not isinstance(query, dict):
        return SummaryResult(found=False, error="not_found")

    pages = query.get("pages")
    if not isinstance(pages, dict) or not pages:
        return SummaryResult(found=False, error="not_found")

    if len(pages) > 1:
        logger.debug("Got %d pages, using the first", len(pages))

    page = next(iter(pages.values()))
    extract = page.get("extract") if isinstance(page, dict) else None
    if not isinstance(extract, str) or not extract:
        return SummaryResult(found=False, error="not_found")

    return SummaryResult(found=True, text=extract)


def summary_text(body: Union[bytes, str]) -> str:
    """Like extract_summary, but raises ParseError or ArticleNotFound."""
    result = extract_summary(body)
    if result.found:
        return result.text
    if result.error == "parse":
        raise ParseError("response body is not an extracts document")
    raise ArticleNotFound("no extract in response")
