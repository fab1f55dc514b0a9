"""Network clients and resolvers for JAIR pages."""

from .client import Client
from .exceptions import (
    APIError,
    DecodeError,
    ExtractionError,
    FetchError,
    HarvestError,
    NotFoundError,
    ParseError,
    RateLimitError,
    StorageError,
)
from .issue_client import SITE_ORIGIN, IssueClient, resolve_url
from .viewer_client import (
    DirectLinkResolver,
    PdfLinkResolver,
    ViewerPageResolver,
    decode_pdf_url,
)

__all__ = [
    "Client",
    "IssueClient",
    "PdfLinkResolver",
    "DirectLinkResolver",
    "ViewerPageResolver",
    "SITE_ORIGIN",
    "resolve_url",
    "decode_pdf_url",
    "HarvestError",
    "FetchError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "ParseError",
    "ExtractionError",
    "DecodeError",
    "StorageError",
]
