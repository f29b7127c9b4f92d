"""
Scoring Engine - Turn check results into a readiness score.

Coordinates:
- Weighted aggregation (pass = full weight, warn = half)
- Percentage conversion
- Penalties & caps
- Interpretation bracket and recommendations
"""

import math
from dataclasses import dataclass, field
from typing import List

from adready.logger import logger
from adready.services.scoring.caps import PenaltyEngine
from adready.services.scoring.models import CheckResult, CheckStatus
from adready.services.scoring.weights import SCORING_VERSION

GOOD_THRESHOLD = 80
FAIR_THRESHOLD = 60

INTERPRETATION_GOOD = (
    "Good technical foundation, but AdSense approval depends heavily on content "
    "quality, originality, and policy compliance."
)
INTERPRETATION_FAIR = (
    "Some technical issues need attention. Address critical requirements before applying to AdSense."
)
INTERPRETATION_POOR = (
    "Significant technical issues detected. Your site likely needs substantial "
    "improvements before AdSense consideration."
)

RECOMMENDATIONS_GOOD = (
    "Technical foundation is decent, but remember:",
    "AdSense approval is primarily about content quality and originality",
    "Ensure compliance with all AdSense content policies",
    "Traffic volume and site authority are also crucial factors",
)
RECOMMENDATIONS_FAIR = (
    "Address remaining technical issues",
    "Focus heavily on content quality and originality",
    "Ensure full compliance with AdSense content policies",
    "Build substantial site authority before applying",
)
RECOMMENDATIONS_POOR = (
    "Fix ALL critical issues immediately (HTTPS, Privacy Policy, Content Volume)",
    "Add substantial, original, high-quality content (minimum 1500+ words per page)",
    "Ensure complete site structure with all required legal pages",
    "AdSense approval requires months of consistent, valuable content creation",
)


@dataclass
class ScoreReport:
    """Complete scoring result."""
    raw_score: float
    total_possible_weight: float
    final_score: int
    penalties: List[str] = field(default_factory=list)
    interpretation: str = ""
    recommendations: List[str] = field(default_factory=list)
    critical_failures: List[str] = field(default_factory=list)
    fail_count: int = 0
    scoring_version: str = SCORING_VERSION


def percentage(raw_score: float, total_possible_weight: float) -> int:
    """Share of the possible weight, rounded half up."""
    if total_possible_weight <= 0:
        return 0
    return int(math.floor(raw_score / total_possible_weight * 100 + 0.5))


def interpret(score: int) -> tuple[str, List[str]]:
    if score >= GOOD_THRESHOLD:
        return INTERPRETATION_GOOD, list(RECOMMENDATIONS_GOOD)
    if score >= FAIR_THRESHOLD:
        return INTERPRETATION_FAIR, list(RECOMMENDATIONS_FAIR)
    return INTERPRETATION_POOR, list(RECOMMENDATIONS_POOR)


class ScoringEngine:
    """Main scoring orchestrator. Holds no per-run state."""

    def __init__(self, penalty_engine: PenaltyEngine = None):
        self.penalty_engine = penalty_engine or PenaltyEngine()

    def score(self, checks: List[CheckResult]) -> ScoreReport:
        """Score a list of check results.

        Returns:
            ScoreReport with the final score, penalties and guidance
        """
        automated = [c for c in checks if c.status != CheckStatus.MANUAL]
        total_possible_weight = sum(c.weight for c in automated)
        raw_score = sum(c.points for c in automated)

        base_score = percentage(raw_score, total_possible_weight)
        penalty_result = self.penalty_engine.apply(base_score, checks)
        interpretation, recommendations = interpret(penalty_result.score)

        logger.info(
            f"Score: raw={raw_score}/{total_possible_weight}, base={base_score}, "
            f"final={penalty_result.score}, fails={penalty_result.fail_count}"
        )

        return ScoreReport(
            raw_score=raw_score,
            total_possible_weight=total_possible_weight,
            final_score=penalty_result.score,
            penalties=penalty_result.penalties,
            interpretation=interpretation,
            recommendations=recommendations,
            critical_failures=penalty_result.critical_failures,
            fail_count=penalty_result.fail_count,
        )
