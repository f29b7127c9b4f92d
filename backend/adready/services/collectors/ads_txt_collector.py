"""
Ads.txt Collector - Fetch ads.txt and look for Google publisher records.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin

from adready.logger import logger
from adready.services.page_fetcher import PageFetcher

GOOGLE_RECORD_RE = re.compile(r"google\.com\s*,\s*(pub-\d+)", re.IGNORECASE)


@dataclass
class AdsTxtData:
    """Parsed ads.txt data."""
    exists: bool = False
    content: str = ""
    publisher_ids: List[str] = field(default_factory=list)
    failure: Optional[str] = None  # probe failure kind when not reachable
    error: Optional[str] = None

    @property
    def has_google_publisher(self) -> bool:
        return bool(self.publisher_ids)


class AdsTxtCollector:
    """Fetches and parses ads.txt."""

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    async def fetch(self, base_url: str) -> AdsTxtData:
        """Fetch ads.txt from the domain."""
        ads_url = urljoin(base_url, "/ads.txt")
        probe = await self.fetcher.probe(ads_url)

        if not probe.ok:
            logger.debug(f"ads.txt unavailable at {ads_url}: {probe.error}")
            return AdsTxtData(exists=False, failure=probe.failure, error=probe.error)

        return self.parse(probe.body)

    def parse(self, content: str) -> AdsTxtData:
        """Parse ads.txt content."""
        data = AdsTxtData(exists=True, content=content)

        for line in content.splitlines():
            record = line.split("#", 1)[0]
            match = GOOGLE_RECORD_RE.search(record)
            if match and match.group(1) not in data.publisher_ids:
                data.publisher_ids.append(match.group(1))

        return data
