"""Issue reference schema."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

BASE_ISSUE_URL = "https://www.jair.org/index.php/jair/issue/view/"


class IssueReference(BaseModel):
    """A JAIR issue, identified by its numeric ID.

    The listing page URL is derived purely from the ID.

    Attributes:
        issue_id: Numeric issue identifier (e.g., 1085)
    """

    model_config = ConfigDict(frozen=True)

    issue_id: int

    @property
    def url(self) -> str:
        return f"{BASE_ISSUE_URL}{self.issue_id}"

    @classmethod
    def range(cls, start: int, count: int) -> Iterator["IssueReference"]:
        """Yield references for issues start through start + count - 1."""
        for issue_id in range(start, start + count):
            yield cls(issue_id=issue_id)
