"""PDF downloader for fetching article files from JAIR."""

import hashlib
import logging
from pathlib import Path

import httpx

from jair_harvester.clients.client import Client
from jair_harvester.clients.exceptions import StorageError
from schemas.article import ResolvedDownload
from schemas.download import DownloadResult

from .filenames import pdf_filename

module_logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class PDFDownloader(Client):
    """Streams article PDFs to a local directory.

    Files are named from the sanitized article title. The response body is
    written chunk by chunk while a SHA-256 checksum is computed, so a PDF is
    never held in memory whole. A file left incomplete by a failed transfer
    is removed.

    Example:
        with PDFDownloader({"base_url": SITE_ORIGIN}) as downloader:
            result = downloader.download(resolved, Path("./pdfs"))
    """

    def __init__(
        self,
        config: dict,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the PDF downloader.

        Args:
            config: Client configuration (see Client)
            http_client: Optional HTTP client for downloading files.
                         If not provided, one will be created internally.
            logger: Optional logger; defaults to the module logger
        """
        super().__init__(config, logger=logger or module_logger)
        self._client = http_client
        self._owns_client = http_client is None

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            super().close()

    def fetch(self, url: str, destination: Path) -> tuple[str, int]:
        return self.download_file(url, destination)

    def download(
        self,
        resolved: ResolvedDownload,
        output_dir: Path,
    ) -> DownloadResult:
        """Download an article's PDF into output_dir.

        Args:
            resolved: Article title and direct PDF URL
            output_dir: Directory to write the file into

        Returns:
            DownloadResult describing the written file

        Raises:
            FetchError: If the file cannot be fetched
            StorageError: If the file cannot be created or written
        """
        destination = output_dir / pdf_filename(resolved.title)
        checksum, size = self.download_file(resolved.direct_url, destination)

        self.logger.info(
            f"PDF downloaded successfully: path={destination} size={size}"
        )
        return DownloadResult(
            title=resolved.title,
            url=resolved.direct_url,
            path=str(destination),
            success=True,
            checksum=checksum,
            size=size,
        )

    def download_file(self, url: str, destination: Path) -> tuple[str, int]:
        """Stream a file from URL to local path.

        Args:
            url: URL to download from
            destination: Local file path to save to

        Returns:
            Tuple of (hex SHA-256 checksum, bytes written)

        Raises:
            FetchError: If the request fails or returns an error status
            StorageError: If the destination cannot be created or written
        """
        with self.stream(url) as response:
            try:
                out = open(destination, "wb")
            except OSError as e:
                raise StorageError(
                    f"Failed to create file {destination}: {e}", path=destination
                ) from e

            sha256 = hashlib.sha256()
            size = 0
            try:
                with out:
                    for chunk in response.iter_bytes(CHUNK_SIZE):
                        try:
                            out.write(chunk)
                        except OSError as e:
                            raise StorageError(
                                f"Failed to write PDF {destination}: {e}",
                                path=destination,
                            ) from e
                        sha256.update(chunk)
                        size += len(chunk)
            except BaseException:
                self._remove_partial(destination)
                raise

        return sha256.hexdigest(), size

    def _remove_partial(self, destination: Path) -> None:
        """Delete a partially written file, if present."""
        try:
            destination.unlink(missing_ok=True)
        except OSError as e:
            self.logger.warning(f"Could not remove partial file {destination}: {e}")
        else:
            self.logger.debug(f"Removed partial file {destination}")
