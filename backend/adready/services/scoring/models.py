from dataclasses import dataclass
from enum import Enum

from adready.services.collectors.ads_txt_collector import AdsTxtData
from adready.services.collectors.robots_collector import RobotsData
from adready.services.document import Document
from adready.services.page_fetcher import RetrievalOutcome


class CheckStatus(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"
    MANUAL = "manual"


class CheckCategory(str, Enum):
    AUTOMATED = "Automated Technical Checks"
    STRUCTURE = "Site Structure & Accessibility"
    CONTENT = "Content Quality Indicators"
    PERFORMANCE = "Performance & SEO"


@dataclass(frozen=True)
class Verdict:
    """What a check predicate decides."""
    status: CheckStatus
    message: str

    @classmethod
    def passed(cls, message: str) -> "Verdict":
        return cls(CheckStatus.PASS, message)

    @classmethod
    def warned(cls, message: str) -> "Verdict":
        return cls(CheckStatus.WARN, message)

    @classmethod
    def failed(cls, message: str) -> "Verdict":
        return cls(CheckStatus.FAIL, message)


@dataclass(frozen=True)
class CheckResult:
    """Individual check result."""
    name: str
    category: CheckCategory
    weight: int
    status: CheckStatus
    message: str

    @property
    def points(self) -> float:
        """Contribution to the raw score."""
        if self.status == CheckStatus.PASS:
            return self.weight
        if self.status == CheckStatus.WARN:
            return self.weight / 2
        return 0


@dataclass(frozen=True)
class CheckContext:
    """Everything a predicate may look at."""
    document: Document
    retrieval: RetrievalOutcome
    requested_url: str
    robots: RobotsData
    ads_txt: AdsTxtData
