"""Article link schemas."""

from pydantic import BaseModel, field_validator


class ArticleEntry(BaseModel):
    """An article found on an issue listing page.

    Attributes:
        title: Article title, trimmed of surrounding whitespace
        source_link: Absolute URL of the PDF viewer page or the PDF itself
    """

    title: str
    source_link: str

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        return value.strip()


class ResolvedDownload(BaseModel):
    """An article whose direct file URL is known.

    Attributes:
        title: Article title
        direct_url: URL that returns the PDF bytes
    """

    title: str
    direct_url: str
