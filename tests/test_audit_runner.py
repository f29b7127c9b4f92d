"""
End-to-end analyses against an in-memory web.
"""
from dataclasses import replace

import httpx
import pytest

from adready.services.audit_runner import AuditRunner
from adready.services.errors import (
    EmptyOrMinimalContent,
    InvalidUrl,
    UnreachableHost,
    UnsupportedContentType,
)
from adready.services.scoring.engine import INTERPRETATION_GOOD, INTERPRETATION_POOR
from adready.services.scoring.models import CheckStatus

from conftest import build_page

ROBOTS = "User-agent: *\nAllow: /\nSitemap: https://example.com/sitemap.xml\n"
ADS_TXT = "google.com, pub-1234567890123456, DIRECT, f08c47fec0942fa0\n"


@pytest.fixture
def runner(web, fetch_config, clock):
    return AuditRunner(fetch_config, transport=web.transport, clock=clock)


def by_name(report):
    return {check.name: check for check in report.checks}


class TestWellPreparedSite:

    @pytest.mark.asyncio
    async def test_scores_good(self, web, runner):
        web.page("https://example.com/", build_page())
        web.text("https://example.com/robots.txt", ROBOTS)
        web.text("https://example.com/ads.txt", ADS_TXT)

        report = await runner.run("example.com/")

        assert report.final_url == "https://example.com/"
        assert len(report.checks) == 25
        automated = [c for c in report.checks if c.status != CheckStatus.MANUAL]
        assert all(c.status == CheckStatus.PASS for c in automated), [
            (c.name, c.message) for c in automated if c.status != CheckStatus.PASS
        ]
        assert report.score.final_score == 100
        assert report.score.penalties == []
        assert report.score.interpretation == INTERPRETATION_GOOD
        assert report.analysis_time_ms > 0

    @pytest.mark.asyncio
    async def test_http_input_redirected_to_https(self, web, runner):
        web.redirect("http://example.com/", "https://example.com/")
        web.page("https://example.com/", build_page())

        report = await runner.run("http://example.com/")

        assert report.requested_url == "http://example.com/"
        assert report.final_url == "https://example.com/"
        checks = by_name(report)
        assert checks["HTTPS Redirect"].status == CheckStatus.PASS
        assert checks["HTTPS Redirect"].message == "HTTP correctly redirects to HTTPS."

    @pytest.mark.asyncio
    async def test_probes_target_final_host(self, web, runner):
        web.redirect("https://example.com/", "https://www.example.com/home")
        web.page("https://www.example.com/home", build_page())

        await runner.run("https://example.com/")

        assert web.requests_to("https://www.example.com/robots.txt")
        assert web.requests_to("https://www.example.com/ads.txt")

    @pytest.mark.asyncio
    async def test_missing_auxiliary_files_only_warn(self, web, runner):
        web.page("https://example.com/", build_page())
        web.error("https://example.com/ads.txt", httpx.ConnectError)

        report = await runner.run("https://example.com/")

        checks = by_name(report)
        assert checks["Robots.txt Configuration"].status == CheckStatus.WARN
        assert checks["Ads.txt Presence"].status == CheckStatus.WARN
        assert checks["Ads.txt Presence"].message == "Could not analyze ads.txt due to a network error."


class TestInsecureSite:

    @pytest.mark.asyncio
    async def test_critical_failures_are_penalised(self, web, runner):
        web.page("http://insecure.test/", build_page(footer_links=[], main_words=200))

        report = await runner.run("http://insecure.test/")

        checks = by_name(report)
        assert checks["Secure Connection"].status == CheckStatus.FAIL
        assert checks["HTTPS Redirect"].status == CheckStatus.FAIL
        assert checks["Privacy Policy Page"].status == CheckStatus.FAIL
        assert checks["Content Volume"].status == CheckStatus.FAIL
        assert report.score.critical_failures == [
            "HTTPS Redirect", "Privacy Policy Page", "Content Volume",
        ]
        assert report.score.penalties[0] == "Critical issues detected: -45%"
        assert report.score.final_score <= 65
        assert report.score.interpretation == INTERPRETATION_POOR

    @pytest.mark.asyncio
    async def test_https_fallback_to_http(self, web, runner):
        web.error("https://example.com/", httpx.ConnectError)
        web.page("http://example.com/", build_page())

        report = await runner.run("example.com/")

        assert report.final_url == "http://example.com/"
        assert by_name(report)["Secure Connection"].status == CheckStatus.FAIL


class TestTerminalErrors:

    @pytest.mark.asyncio
    async def test_invalid_url_makes_no_requests(self, web, runner):
        with pytest.raises(InvalidUrl):
            await runner.run("https://exa mple.com")
        assert web.requests == []

    @pytest.mark.asyncio
    async def test_private_address_is_refused(self, web, fetch_config):
        runner = AuditRunner(replace(fetch_config, block_private_hosts=True), transport=web.transport)

        with pytest.raises(InvalidUrl, match="private or internal"):
            await runner.run("http://127.0.0.1/")
        assert web.requests == []

    @pytest.mark.asyncio
    async def test_unreachable_host(self, web, runner):
        web.error("https://down.test/", httpx.ConnectError)
        web.error("http://down.test/", httpx.ConnectError)

        with pytest.raises(UnreachableHost) as exc:
            await runner.run("down.test/")

        assert exc.value.status_code == 500
        assert exc.value.message.startswith("Failed to access website:")

    @pytest.mark.asyncio
    async def test_non_html_content(self, web, runner):
        web.page("https://example.com/data.json", '{"items": []}' * 20, content_type="application/json")

        with pytest.raises(UnsupportedContentType) as exc:
            await runner.run("https://example.com/data.json")

        assert exc.value.message == "The URL does not point to an HTML webpage."
        assert exc.value.details == "Please provide a valid website URL."

    @pytest.mark.asyncio
    async def test_minimal_content(self, web, runner):
        web.page("https://example.com/", "<html><body>Hi</body></html>")

        with pytest.raises(EmptyOrMinimalContent):
            await runner.run("https://example.com/")
        # No probes for a page that could not be analysed
        assert len(web.requests) == 1
