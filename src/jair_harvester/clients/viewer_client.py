"""Resolvers that turn article links into direct PDF URLs."""

import re
from abc import ABC, abstractmethod
from urllib.parse import unquote_plus

from schemas.article import ArticleEntry, ResolvedDownload

from .client import Client
from .exceptions import DecodeError, ExtractionError

PDF_URL_PATTERN = re.compile(r'var pdfUrl = "([^"]+)"')
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_pdf_url(value: str) -> str:
    """Query-unescape an embedded URL and unescape its forward slashes.

    Percent escapes are decoded and ``+`` becomes a space.

    Raises:
        DecodeError: If the value contains a malformed percent escape
    """
    if MALFORMED_ESCAPE.search(value):
        raise DecodeError(f"Malformed percent-encoding in {value!r}", value=value)
    try:
        decoded = unquote_plus(value, errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Invalid UTF-8 in {value!r}", value=value) from e
    return decoded.replace("\\/", "/")


class PdfLinkResolver(ABC):
    """Interface for resolving an article entry to a direct file URL."""

    @abstractmethod
    def resolve(self, entry: ArticleEntry) -> ResolvedDownload:
        """Return the direct download for an article entry."""
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class DirectLinkResolver(PdfLinkResolver):
    """Resolver for listings whose PDF buttons already point at the file."""

    def resolve(self, entry: ArticleEntry) -> ResolvedDownload:
        return ResolvedDownload(title=entry.title, direct_url=entry.source_link)


class ViewerPageResolver(Client, PdfLinkResolver):
    """Resolver that reads the PDF URL out of a viewer page script.

    JAIR's PDF buttons lead to a viewer page that embeds the file location
    as ``var pdfUrl = "..."`` with escaped slashes and percent-encoding.

    Example:
        with ViewerPageResolver({"base_url": SITE_ORIGIN}) as resolver:
            download = resolver.resolve(entry)
    """

    def fetch(self, viewer_url: str) -> str:
        """Fetch a viewer page and return the direct PDF URL.

        Raises:
            FetchError: If the viewer page cannot be fetched
            ExtractionError: If the page has no embedded PDF URL
            DecodeError: If the embedded URL is malformed
        """
        response = self.get(viewer_url)
        return self.extract_pdf_url(response.text, viewer_url)

    def resolve(self, entry: ArticleEntry) -> ResolvedDownload:
        direct_url = self.fetch(entry.source_link)
        self.logger.debug(f"Resolved {entry.source_link} to {direct_url}")
        return ResolvedDownload(title=entry.title, direct_url=direct_url)

    def extract_pdf_url(self, text: str, url: str | None = None) -> str:
        """Find and decode the embedded PDF URL in viewer page text."""
        match = PDF_URL_PATTERN.search(text)
        if match is None:
            raise ExtractionError(f"No PDF URL found in viewer page {url}", url=url)
        return decode_pdf_url(match.group(1))
