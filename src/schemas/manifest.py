"""Harvest manifest schemas.

A harvest manifest records one run of the harvester: which issues were
requested, what was found on each listing page, and the outcome of every
download. It is written as ``harvest-manifest.json`` in the output
directory.

Directory structure:
    <output>/
    ├── harvest-manifest.json     # HarvestManifest
    ├── Some_Article_Title.pdf
    └── ...
"""

from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from .download import DownloadResult


class IssueHarvest(BaseModel):
    """Results for a single issue listing.

    Attributes:
        issue_id: Numeric issue identifier
        url: Listing page URL
        articles_found: Number of articles with a PDF link
        downloads: Outcome of each article download, in listing order
        error: Error message if the listing itself could not be processed
    """

    issue_id: int
    url: str
    articles_found: int = 0
    downloads: list[DownloadResult] = []
    error: str | None = None


class HarvestManifest(BaseModel):
    """Manifest for a harvest run.

    Attributes:
        id: Run identifier (e.g., "1085-1159")
        version: Manifest schema version
        source_url: Site origin the articles were harvested from
        start_issue: First issue ID requested
        end_issue: Last issue ID requested
        output_dir: Directory the PDFs were written to
        harvest_timestamp: When the run started
        harvest_agent: Software that performed the harvest
        issues: Per-issue results
    """

    id: str
    version: str = "1.0"
    source_url: str | None = None
    start_issue: int
    end_issue: int
    output_dir: str
    harvest_timestamp: datetime = Field(default_factory=datetime.now)
    harvest_agent: str = "jair-harvester"
    issues: list[IssueHarvest] = []

    @computed_field
    @property
    def downloaded(self) -> int:
        return sum(1 for i in self.issues for d in i.downloads if d.success)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for i in self.issues for d in i.downloads if not d.success)
