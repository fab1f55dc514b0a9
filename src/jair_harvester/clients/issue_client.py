"""Client for JAIR issue listing pages."""

from lxml import etree, html

from schemas.article import ArticleEntry
from schemas.issue import IssueReference

from .client import Client
from .exceptions import ParseError

SITE_ORIGIN = "https://www.jair.org"


def _has_class(name: str) -> str:
    """XPath predicate matching elements whose class list contains name."""
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


ARTICLE_BLOCK_XPATH = (
    f"//*[{_has_class('article-summary')}]//*[{_has_class('media-body')}]"
)
TITLE_XPATH = f".//h3[{_has_class('media-heading')}]//a"
PDF_LINK_XPATH = f".//*[{_has_class('btn-group')}]//a[{_has_class('pdf')}]/@href"


def resolve_url(href: str) -> str:
    """Make a listing href absolute against the site origin."""
    if href.startswith("http"):
        return href
    return SITE_ORIGIN + href


class IssueClient(Client):
    """Client that extracts article links from issue listing pages.

    Each article on a listing page is a ``.article-summary .media-body``
    block with an ``h3.media-heading a`` title and a ``.btn-group a.pdf``
    button. Blocks without a PDF button are skipped.

    Example:
        with IssueClient({"base_url": SITE_ORIGIN}) as client:
            entries = client.fetch(1085)
    """

    def fetch(self, issue_id: int) -> list[ArticleEntry]:
        """Fetch the listing page for an issue and extract its articles.

        Args:
            issue_id: Numeric issue identifier

        Returns:
            Article entries in document order

        Raises:
            FetchError: If the page cannot be fetched
            ParseError: If the page is not parseable HTML
        """
        return self.fetch_url(IssueReference(issue_id=issue_id).url)

    def fetch_url(self, listing_url: str) -> list[ArticleEntry]:
        """Fetch a listing page by URL and extract its articles."""
        response = self.get(listing_url)
        entries = self.parse_listing(response.content, listing_url)
        self.logger.debug(f"Found {len(entries)} articles at {listing_url}")
        return entries

    def parse_listing(
        self, content: bytes | str, url: str | None = None
    ) -> list[ArticleEntry]:
        """Extract article entries from listing page markup.

        Args:
            content: Raw HTML of the listing page
            url: Page URL, used in error messages

        Returns:
            Article entries in document order

        Raises:
            ParseError: If the content is empty or not parseable HTML
        """
        try:
            document = html.fromstring(content)
        except (etree.ParserError, ValueError) as e:
            raise ParseError(f"Failed to parse HTML document {url}: {e}") from e

        entries: list[ArticleEntry] = []
        for block in document.xpath(ARTICLE_BLOCK_XPATH):
            hrefs = block.xpath(PDF_LINK_XPATH)
            if not hrefs:
                continue

            title = "".join(
                "".join(link.itertext()) for link in block.xpath(TITLE_XPATH)
            )
            entries.append(
                ArticleEntry(title=title, source_link=resolve_url(str(hrefs[0])))
            )

        return entries
