"""Schema definitions for JAIR Harvester."""

from .article import ArticleEntry, ResolvedDownload
from .download import DownloadResult
from .issue import BASE_ISSUE_URL, IssueReference
from .manifest import HarvestManifest, IssueHarvest

__all__ = [
    "ArticleEntry",
    "BASE_ISSUE_URL",
    "DownloadResult",
    "HarvestManifest",
    "IssueHarvest",
    "IssueReference",
    "ResolvedDownload",
]
