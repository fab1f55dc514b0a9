"""Download outcome schema."""

from pydantic import BaseModel


class DownloadResult(BaseModel):
    """Outcome of downloading one article.

    Attributes:
        title: Article title
        url: URL the file was (or would have been) fetched from
        path: Destination file path, if one was chosen
        success: Whether the file was written completely
        checksum: SHA-256 hash of the written file
        size: Number of bytes written
        error: Error message for failed downloads
    """

    title: str
    url: str | None = None
    path: str | None = None
    success: bool = False
    checksum: str | None = None
    size: int = 0
    error: str | None = None
