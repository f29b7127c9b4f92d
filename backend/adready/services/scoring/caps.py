"""
Penalties & Caps - Keep pages with missing essentials from scoring well.

Rules:
- Each failed critical check → -15 points
- More than 5 failed checks → -3 points per extra failure
- Any failed critical check → score capped at 65
"""

from dataclasses import dataclass, field
from typing import List

from adready.logger import logger
from adready.services.scoring.models import CheckResult, CheckStatus


@dataclass(frozen=True)
class PenaltyConfig:
    """Penalty and cap policy."""
    critical_prefixes: tuple[str, ...] = ("privacy policy", "https", "content volume", "robots.txt")
    critical_penalty: int = 15
    failure_allowance: int = 5
    failure_penalty: int = 3
    critical_cap: int = 65


@dataclass
class PenaltyResult:
    """Result of applying penalties and caps."""
    score: int
    critical_failures: List[str] = field(default_factory=list)
    fail_count: int = 0
    penalties: List[str] = field(default_factory=list)


class PenaltyEngine:
    """Apply critical-failure penalties, the failure-volume penalty and the cap."""

    def __init__(self, config: PenaltyConfig = None):
        self.config = config or PenaltyConfig()

    def is_critical(self, check: CheckResult) -> bool:
        return check.name.lower().startswith(self.config.critical_prefixes)

    def apply(self, score: int, checks: List[CheckResult]) -> PenaltyResult:
        """Apply all penalties to a percentage score.

        Args:
            score: Percentage score before penalties
            checks: All check results of the run

        Returns:
            PenaltyResult with the adjusted score and penalty notes
        """
        cfg = self.config
        failed = [c for c in checks if c.status == CheckStatus.FAIL]
        result = PenaltyResult(
            score=score,
            critical_failures=[c.name for c in failed if self.is_critical(c)],
            fail_count=len(failed),
        )

        # Penalty 1: critical failures
        if result.critical_failures:
            penalty = cfg.critical_penalty * len(result.critical_failures)
            result.score = max(0, result.score - penalty)
            result.penalties.append(f"Critical issues detected: -{penalty}%")
            logger.info(f"Applied penalty: {len(result.critical_failures)} critical failure(s) → -{penalty}")

        # Penalty 2: failure volume
        if result.fail_count > cfg.failure_allowance:
            penalty = (result.fail_count - cfg.failure_allowance) * cfg.failure_penalty
            result.score = max(0, result.score - penalty)
            result.penalties.append(f"Multiple failures: -{penalty}%")
            logger.info(f"Applied penalty: {result.fail_count} failures → -{penalty}")

        # Cap: critical requirements missing
        if result.critical_failures and result.score > cfg.critical_cap:
            result.score = cfg.critical_cap
            logger.info(f"Applied cap: critical failure → score≤{cfg.critical_cap}")

        result.score = min(max(result.score, 0), 100)
        return result
