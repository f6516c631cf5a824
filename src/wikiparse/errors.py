"""Exception hierarchy for page loading and document input/output."""


class WikiParseError(Exception):
    """Base class for all wikiparse errors."""


class PageLoadError(WikiParseError):
    """The export document could not be read or parsed."""


class MissingFieldError(PageLoadError):
    """A ``<page>`` element lacks a required child element."""

    def __init__(self, field: str, page_index: int):
        self.field = field
        self.page_index = page_index
        super().__init__(f"Page #{page_index} is missing required field {field!r}")


class DocumentReadError(WikiParseError):
    """An output document could not be read back for tagger input."""


class DocumentWriteError(WikiParseError):
    """An output file or its directory could not be written."""
