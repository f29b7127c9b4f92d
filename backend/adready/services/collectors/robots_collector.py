"""
Robots.txt Collector - Fetch and parse robots.txt.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urljoin

from adready.logger import logger
from adready.services.page_fetcher import PageFetcher


@dataclass
class RobotsData:
    """Parsed robots.txt data."""
    exists: bool = False
    content: str = ""
    disallow_rules: List[str] = field(default_factory=list)
    sitemaps: List[str] = field(default_factory=list)
    blocked_agents: List[str] = field(default_factory=list)
    failure: Optional[str] = None  # probe failure kind when not reachable
    error: Optional[str] = None

    @property
    def blocks_crawlers(self) -> bool:
        return bool(self.blocked_agents)

    @property
    def has_sitemap(self) -> bool:
        return bool(self.sitemaps)


class RobotsCollector:
    """Fetches and parses robots.txt."""

    # Agents whose full block keeps ad crawlers out
    CRAWLER_AGENTS = ("*", "googlebot", "adsbot-google")

    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    async def fetch(self, base_url: str) -> RobotsData:
        """Fetch robots.txt from the domain."""
        robots_url = urljoin(base_url, "/robots.txt")
        probe = await self.fetcher.probe(robots_url)

        if not probe.ok:
            logger.warning(f"robots.txt unavailable at {robots_url}: {probe.error}")
            return RobotsData(exists=False, failure=probe.failure, error=probe.error)

        return self.parse(probe.body)

    def parse(self, content: str) -> RobotsData:
        """Parse robots.txt content into user-agent groups."""
        data = RobotsData(exists=True, content=content)

        groups = []
        current_group = {"agents": [], "rules": []}

        for line in content.splitlines():
            line = line.split("#", 1)[0].strip()
            if not line or ":" not in line:
                continue

            key, value = line.split(":", 1)
            key = key.strip().lower()
            value = value.strip()

            if key == "user-agent":
                # A user-agent after rules starts a new group
                if current_group["rules"]:
                    groups.append(current_group)
                    current_group = {"agents": [], "rules": []}
                current_group["agents"].append(value.lower())

            elif key in ("disallow", "allow"):
                current_group["rules"].append((key, value))
                if key == "disallow" and value:
                    data.disallow_rules.append(value)

            elif key == "sitemap" and value:
                data.sitemaps.append(value)

        if current_group["agents"]:
            groups.append(current_group)

        for group in groups:
            rules = group["rules"]
            blocking_all = any(r == ("disallow", "/") for r in rules)
            allowing_all = any(r == ("allow", "/") for r in rules)
            if not blocking_all or allowing_all:
                continue

            for agent in group["agents"]:
                if agent in self.CRAWLER_AGENTS and agent not in data.blocked_agents:
                    data.blocked_agents.append(agent)

        return data
