"""Pytest fixtures for JAIR Harvester tests."""

import httpx
import pytest

from jair_harvester.clients.issue_client import SITE_ORIGIN

LISTING_HTML = """<!DOCTYPE html>
<html>
<head><title>Vol. 70 (2021)</title></head>
<body>
<div class="sections">
  <div class="obj_article_summary article-summary media">
    <div class="media-body">
      <h3 class="media-heading">
        <a href="/index.php/jair/article/view/12001">
          Learning to Plan
        </a>
      </h3>
      <div class="btn-group" role="group">
        <a class="galley-link btn btn-primary pdf" href="/index.php/jair/article/view/12001/26601">PDF</a>
      </div>
    </div>
  </div>
  <div class="article-summary media">
    <div class="media-body">
      <h3 class="media-heading"><a href="/index.php/jair/article/view/12002">Editorial Note</a></h3>
      <div class="btn-group" role="group"></div>
    </div>
  </div>
  <div class="article-summary media">
    <div class="media-body">
      <h3 class="media-heading">
        <a href="/index.php/jair/article/view/12003">  Search: A <em>Survey</em>  </a>
      </h3>
      <div class="btn-group">
        <a class="btn pdf" href="https://files.example.org/12003.pdf">PDF</a>
      </div>
    </div>
  </div>
</div>
</body>
</html>
"""

VIEWER_HTML = """<!DOCTYPE html>
<html>
<head>
<script type="text/javascript">
  var pdfUrl = "https:\\/\\/www.jair.org\\/index.php\\/jair\\/article\\/download\\/12001\\/26601\\/Learning%20to%20Plan.pdf";
  window.onload = function() { PDFJS.load(pdfUrl); };
</script>
</head>
<body><div id="pdfCanvasContainer"></div></body>
</html>
"""


@pytest.fixture
def listing_html():
    """Issue listing page with two PDF articles and one article without."""
    return LISTING_HTML


@pytest.fixture
def viewer_html():
    """Viewer page embedding an escaped, percent-encoded PDF URL."""
    return VIEWER_HTML


@pytest.fixture
def client_config():
    """Minimal client configuration."""
    return {"base_url": SITE_ORIGIN}


@pytest.fixture
def make_http_client():
    """Build httpx clients backed by a route table instead of the network.

    Routes map absolute URLs to either an httpx.Response or a callable
    taking the request. Unknown URLs return 404. Every requested URL is
    recorded on the returned client's ``requested`` list.
    """
    created: list[httpx.Client] = []

    def factory(routes: dict) -> httpx.Client:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            requested.append(url)
            route = routes.get(url)
            if route is None:
                return httpx.Response(404)
            if callable(route):
                return route(request)
            return route

        http_client = httpx.Client(
            base_url=SITE_ORIGIN, transport=httpx.MockTransport(handler)
        )
        http_client.requested = requested
        created.append(http_client)
        return http_client

    yield factory

    for http_client in created:
        http_client.close()
