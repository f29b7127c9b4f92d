"""
Audit Runner - Main orchestrator for readiness analyses.

Coordinates URL resolution, page fetching, parsing, probes, checks and scoring.
"""
import asyncio
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from urllib.parse import urlparse

import httpx

from adready.config import FetchConfig
from adready.logger import logger
from adready.services.collectors.ads_txt_collector import AdsTxtCollector
from adready.services.collectors.robots_collector import RobotsCollector
from adready.services.document import parse_document
from adready.services.errors import InvalidUrl, UnsupportedContentType
from adready.services.page_fetcher import PageFetcher
from adready.services.scoring.engine import ScoreReport, ScoringEngine
from adready.services.scoring.models import CheckContext, CheckResult
from adready.services.scoring.registry import run_checks
from adready.services.ssrf_protection import SSRFProtection
from adready.services.url_resolver import resolve_url


@dataclass
class AnalysisReport:
    """Everything one analysis produces."""
    requested_url: str
    final_url: str
    checks: List[CheckResult] = field(default_factory=list)
    score: Optional[ScoreReport] = None
    analysis_time_ms: int = 0


class AuditRunner:
    """Orchestrates the complete analysis process."""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.config = config or FetchConfig.from_settings()
        self.page_fetcher = PageFetcher(self.config, transport=transport, clock=clock)
        self.robots_collector = RobotsCollector(self.page_fetcher)
        self.ads_txt_collector = AdsTxtCollector(self.page_fetcher)
        self.scoring_engine = ScoringEngine()
        self.clock = clock

    async def run(self, raw_url: str) -> AnalysisReport:
        """
        Run a complete analysis.

        Args:
            raw_url: URL as typed by the user

        Returns:
            AnalysisReport with checks and score

        Raises:
            AnalysisError: a terminal failure before checks could run
        """
        started = self.clock()

        # 1. Resolve the input
        url = resolve_url(raw_url)
        if self.config.block_private_hosts:
            is_safe, reason = SSRFProtection.validate_url(url)
            if not is_safe:
                logger.warning(f"SSRF protection blocked {url}: {reason}")
                raise InvalidUrl("URL points to a private or internal address.", reason)

        # 2. Fetch the page
        logger.info(f"Starting analysis for {url}")
        retrieval = await self.page_fetcher.fetch_with_fallback(url)

        if "text/html" not in retrieval.content_type.lower():
            raise UnsupportedContentType(
                "The URL does not point to an HTML webpage.",
                "Please provide a valid website URL."
            )

        # 3. Parse
        document = parse_document(retrieval.body)

        # 4. Fetch auxiliary files in parallel
        base_url = self._get_base_url(retrieval.final_url)
        robots_data, ads_txt_data = await asyncio.gather(
            self.robots_collector.fetch(base_url),
            self.ads_txt_collector.fetch(base_url),
        )

        # 5. Checks and scoring
        context = CheckContext(
            document=document,
            retrieval=retrieval,
            requested_url=url,
            robots=robots_data,
            ads_txt=ads_txt_data,
        )
        checks = run_checks(context)
        score = self.scoring_engine.score(checks)

        elapsed_ms = int((self.clock() - started) * 1000)
        logger.info(f"Completed analysis for {retrieval.final_url}: score={score.final_score} ({elapsed_ms}ms)")

        return AnalysisReport(
            requested_url=url,
            final_url=retrieval.final_url,
            checks=checks,
            score=score,
            analysis_time_ms=elapsed_ms,
        )

    def _get_base_url(self, url: str) -> str:
        """Extract base URL (scheme + host)."""
        parsed = urlparse(url)
        return f"{parsed.scheme}://{parsed.netloc}"
