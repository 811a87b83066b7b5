# wikisummary/errors.py


class WikiSummaryError(Exception):
    """Base class for every failure a lookup can end with."""


class FetchError(WikiSummaryError):
    """Network or transport failure: DNS, refused connection, timeout, non-2xx."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ParseError(WikiSummaryError):
    """The response body is not the JSON document we expect."""


class ArticleNotFound(WikiSummaryError):
    """The response parsed but carries no extract for the title."""


class TargetSurfaceReadOnly(WikiSummaryError):
    def __init__(self, name: str):
        super().__init__(f"Surface '{name}' is read-only")
        self.name = name


class SurfaceNotFound(WikiSummaryError):
    def __init__(self, name: str):
        super().__init__(f"No surface named '{name}'")
        self.name = name
