"""
Shared pytest fixtures for AdReady tests.
"""

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from adready.config import FetchConfig
from adready.services.collectors.ads_txt_collector import AdsTxtData
from adready.services.collectors.robots_collector import RobotsData
from adready.services.document import parse_document
from adready.services.page_fetcher import RetrievalOutcome
from adready.services.scoring.models import CheckContext

VOCABULARY = (
    "garden soil compost planting seasonal harvest watering sunlight mulch seedlings "
    "tomatoes raised beds irrigation pruning perennials orchard greenhouse climate"
).split()


def words(count: int) -> str:
    """``count`` distinct-looking words, all longer than two characters."""
    return " ".join(VOCABULARY[i % len(VOCABULARY)] for i in range(count))


def _route_key(url) -> str:
    u = httpx.URL(str(url))
    return f"{u.scheme}://{u.host}{u.path or '/'}"


class FakeWeb:
    """In-memory web served through httpx.MockTransport."""

    def __init__(self):
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def page(self, url: str, body: str, status: int = 200, content_type: str = "text/html; charset=utf-8"):
        def respond(request):
            return httpx.Response(status, text=body, headers={"content-type": content_type})
        self.routes[_route_key(url)] = respond
        return self

    def text(self, url: str, body: str, status: int = 200):
        return self.page(url, body, status=status, content_type="text/plain")

    def redirect(self, url: str, location: str, status: int = 301):
        def respond(request):
            return httpx.Response(status, headers={"location": location})
        self.routes[_route_key(url)] = respond
        return self

    def error(self, url: str, exc_type=httpx.ConnectError):
        def respond(request):
            raise exc_type("simulated failure", request=request)
        self.routes[_route_key(url)] = respond
        return self

    def handler(self, request: httpx.Request):
        self.requests.append(request)
        respond = self.routes.get(_route_key(request.url))
        if respond is None:
            return httpx.Response(404, text="missing", headers={"content-type": "text/plain"})
        return respond(request)

    def requests_to(self, url: str) -> List[httpx.Request]:
        key = _route_key(url)
        return [r for r in self.requests if _route_key(r.url) == key]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


class FakeClock:
    """Deterministic clock advancing ``step`` seconds per reading."""

    def __init__(self, step: float = 0.1):
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current


def build_page(
    *,
    title: str = "Seasonal Gardening Guide for Beginners",
    description: Optional[str] = "x" * 140,
    lang: Optional[str] = "en",
    viewport: bool = True,
    responsive_css: bool = True,
    favicon: bool = True,
    nav_links: Optional[List[tuple]] = None,
    footer_links: Optional[List[tuple]] = None,
    headings: str = "<h1>Garden Guide</h1><h2>Soil</h2><h2>Watering</h2>",
    images: str = '<img src="/a.jpg" alt="Raised beds"><img src="/b.jpg" alt="Compost heap">',
    analytics: bool = True,
    json_ld: bool = True,
    main_words: int = 2000,
    extra_body: str = "",
) -> str:
    """Markup for a well-prepared page; each argument can spoil one aspect."""
    if nav_links is None:
        nav_links = [("/", "Home"), ("/guides", "Guides"), ("/about", "About"),
                     ("/contact", "Contact"), ("/blog", "Blog")]
    if footer_links is None:
        footer_links = [("/privacy-policy", "Privacy Policy"), ("/terms", "Terms of Service"),
                        ("https://facebook.com/gardens", "Facebook"),
                        ("https://instagram.com/gardens", "Instagram")]

    head = []
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    if viewport:
        head.append('<meta name="viewport" content="width=device-width, initial-scale=1">')
    if responsive_css:
        head.append("<style>@media (max-width: 600px) { body { margin: 0; } }</style>")
    if favicon:
        head.append('<link rel="icon" href="/favicon.ico">')
    if title is not None:
        head.append(f"<title>{title}</title>")
    if analytics:
        head.append('<script async src="https://www.googletagmanager.com/gtag/js?id=G-TEST"></script>')
    if json_ld:
        head.append('<script type="application/ld+json">{"@context": "https://schema.org", "@type": "WebSite"}</script>')

    nav = "".join(f'<a href="{href}">{text}</a>' for href, text in nav_links)
    footer = "".join(f'<a href="{href}">{text}</a>' for href, text in footer_links)
    lang_attr = f' lang="{lang}"' if lang else ""

    return (
        f"<!DOCTYPE html><html{lang_attr}><head>{''.join(head)}</head><body>"
        f"<header><nav>{nav}</nav></header>"
        f"<main>{headings}{images}<p>{words(main_words)}</p></main>"
        f"{extra_body}<footer>{footer}</footer></body></html>"
    )


@pytest.fixture
def fetch_config() -> FetchConfig:
    """Retrieval configuration for tests (no DNS lookups)."""
    return FetchConfig(block_private_hosts=False)


@pytest.fixture
def web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_context():
    """Build a CheckContext around a page."""
    def _make(
        html: str,
        final_url: str = "https://example.com/",
        requested_url: Optional[str] = None,
        elapsed_ms: int = 400,
        robots: Optional[RobotsData] = None,
        ads_txt: Optional[AdsTxtData] = None,
    ) -> CheckContext:
        return CheckContext(
            document=parse_document(html),
            retrieval=RetrievalOutcome(
                final_url=final_url,
                status_code=200,
                headers={"content-type": "text/html"},
                body=html,
                elapsed_ms=elapsed_ms,
            ),
            requested_url=requested_url or final_url,
            robots=robots or RobotsData(exists=True, sitemaps=["https://example.com/sitemap.xml"]),
            ads_txt=ads_txt or AdsTxtData(exists=True, publisher_ids=["pub-1234567890"]),
        )
    return _make
