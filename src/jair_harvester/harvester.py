"""Issue harvester that drives the listing, resolve and download steps."""

import logging
from datetime import datetime
from pathlib import Path

from jair_harvester.clients import (
    HarvestError,
    IssueClient,
    PdfLinkResolver,
    StorageError,
)
from jair_harvester.clients.issue_client import SITE_ORIGIN
from jair_harvester.downloaders import PDFDownloader
from schemas.article import ArticleEntry
from schemas.download import DownloadResult
from schemas.issue import IssueReference
from schemas.manifest import HarvestManifest, IssueHarvest

module_logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "harvest-manifest.json"


class IssueHarvester:
    """Harvests article PDFs for a contiguous range of JAIR issues.

    For each issue the listing page is scraped for articles, each article
    link is resolved to a direct PDF URL, and the PDF is downloaded into
    the output directory. A failure affects only the issue or article it
    occurred on; it is logged and the harvest moves on.

    Example:
        config = {"base_url": SITE_ORIGIN}
        with IssueClient(config) as issues, ViewerPageResolver(config) as resolver, \\
                PDFDownloader(config) as downloader:
            harvester = IssueHarvester(Path("./pdfs"), issues, resolver, downloader)
            manifest = harvester.harvest(1085, 75)
    """

    def __init__(
        self,
        output_dir: Path,
        issue_client: IssueClient,
        resolver: PdfLinkResolver,
        downloader: PDFDownloader,
        write_manifest: bool = True,
        logger: logging.Logger | None = None,
    ):
        """Initialize the harvester.

        Args:
            output_dir: Directory PDFs are written to; must already exist
            issue_client: Client for issue listing pages
            resolver: Strategy for turning article links into PDF URLs
            downloader: Downloader that writes PDFs to disk
            write_manifest: Whether to write harvest-manifest.json
            logger: Optional logger; defaults to the module logger
        """
        self.output_dir = output_dir
        self.issue_client = issue_client
        self.resolver = resolver
        self.downloader = downloader
        self.write_manifest = write_manifest
        self.logger = logger or module_logger

    def harvest(self, start_issue: int, count: int) -> HarvestManifest:
        """Harvest issues start_issue through start_issue + count - 1.

        Args:
            start_issue: First issue ID
            count: Number of consecutive issues

        Returns:
            The HarvestManifest for the run
        """
        end_issue = start_issue + count - 1
        manifest = HarvestManifest(
            id=f"{start_issue}-{end_issue}",
            source_url=SITE_ORIGIN,
            start_issue=start_issue,
            end_issue=end_issue,
            output_dir=str(self.output_dir),
            harvest_timestamp=datetime.now(),
        )

        for issue in IssueReference.range(start_issue, count):
            manifest.issues.append(self.harvest_issue(issue))

        if self.write_manifest:
            manifest_path = self.output_dir / MANIFEST_FILENAME
            manifest_path.write_text(manifest.model_dump_json(indent=2))
            self.logger.debug(f"Wrote manifest {manifest_path}")

        self.logger.info(
            f"Harvest {manifest.id} complete: "
            f"{manifest.downloaded} downloaded, {manifest.failed} failed"
        )
        return manifest

    def harvest_issue(self, issue: IssueReference) -> IssueHarvest:
        """Harvest every article on one issue listing page."""
        self.logger.info(f"Processing issue: {issue.url}")
        result = IssueHarvest(issue_id=issue.issue_id, url=issue.url)

        try:
            entries = self.issue_client.fetch_url(issue.url)
        except HarvestError as e:
            self.logger.error(
                f"Failed to find viewer links: issue={issue.issue_id} "
                f"url={issue.url}: {e}"
            )
            result.error = str(e)
            return result

        result.articles_found = len(entries)
        for entry in entries:
            result.downloads.append(self.harvest_article(entry, issue))

        return result

    def harvest_article(
        self, entry: ArticleEntry, issue: IssueReference
    ) -> DownloadResult:
        """Resolve and download a single article."""
        self.logger.info(f"Found PDF viewer link: {entry.source_link}")

        try:
            resolved = self.resolver.resolve(entry)
        except HarvestError as e:
            self.logger.error(
                f"Failed to extract PDF link from viewer: issue={issue.issue_id} "
                f"title={entry.title!r} url={entry.source_link}: {e}"
            )
            return DownloadResult(title=entry.title, url=entry.source_link, error=str(e))

        try:
            download = self.downloader.download(resolved, self.output_dir)
        except HarvestError as e:
            self.logger.error(
                f"Failed to download PDF: issue={issue.issue_id} "
                f"title={entry.title!r} url={resolved.direct_url}: {e}"
            )
            return DownloadResult(
                title=entry.title,
                url=resolved.direct_url,
                path=str(e.path) if isinstance(e, StorageError) else None,
                error=str(e),
            )

        self.logger.info(
            f"Successfully downloaded: title={entry.title!r} path={download.path}"
        )
        return download
