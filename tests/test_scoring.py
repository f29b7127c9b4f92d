"""
Tests for score aggregation, penalties, caps and interpretation.
"""
import pytest

from adready.services.scoring.caps import PenaltyConfig, PenaltyEngine
from adready.services.scoring.engine import (
    INTERPRETATION_FAIR,
    INTERPRETATION_GOOD,
    INTERPRETATION_POOR,
    ScoringEngine,
    interpret,
    percentage,
)
from adready.services.scoring.models import CheckCategory, CheckResult, CheckStatus
from adready.services.scoring.registry import CHECK_REGISTRY, CheckSpec, ManualCheck
from adready.services.scoring.weights import CHECK_WEIGHTS, TOTAL_AUTOMATED_WEIGHT

PASS, WARN, FAIL = CheckStatus.PASS, CheckStatus.WARN, CheckStatus.FAIL


def make_checks(**overrides):
    """Results for the full registry: everything passes unless overridden by name."""
    results = []
    for entry in CHECK_REGISTRY:
        if isinstance(entry, ManualCheck):
            results.append(CheckResult(entry.name, entry.category, 0, CheckStatus.MANUAL, entry.message))
            continue
        status = overrides.get(entry.name, PASS)
        results.append(CheckResult(entry.name, entry.category, entry.weight, status, "msg"))
    return results


def statuses(names, status):
    return {name: status for name in names}


class TestWeights:

    def test_total(self):
        assert TOTAL_AUTOMATED_WEIGHT == 209

    def test_privacy_policy_weighs_most(self):
        assert CHECK_WEIGHTS.privacy_policy == 25
        assert all(
            e.weight <= CHECK_WEIGHTS.privacy_policy
            for e in CHECK_REGISTRY if isinstance(e, CheckSpec)
        )


class TestPercentage:

    @pytest.mark.parametrize("raw, total, expected", [
        (209, 209, 100),
        (0, 209, 0),
        (1, 8, 13),     # 12.5 rounds up
        (203, 209, 97),
        (5, 0, 0),
    ])
    def test_rounding(self, raw, total, expected):
        assert percentage(raw, total) == expected


class TestScoringEngine:

    def setup_method(self):
        self.engine = ScoringEngine()

    def test_all_pass(self):
        report = self.engine.score(make_checks())

        assert report.raw_score == 209
        assert report.total_possible_weight == 209
        assert report.final_score == 100
        assert report.penalties == []
        assert report.interpretation == INTERPRETATION_GOOD

    def test_warn_earns_half_weight(self):
        report = self.engine.score(make_checks(**{"Robots.txt Configuration": WARN}))

        assert report.raw_score == 203
        assert report.final_score == 97

    def test_manual_checks_do_not_count(self):
        checks = [c for c in make_checks() if c.status == CheckStatus.MANUAL]

        report = self.engine.score(checks)

        assert report.total_possible_weight == 0
        assert report.final_score == 0
        assert report.interpretation == INTERPRETATION_POOR

    def test_critical_failure_is_capped(self):
        # 184/209 = 88 -> 73 after penalty -> capped at 65
        report = self.engine.score(make_checks(**{"Privacy Policy Page": FAIL}))

        assert report.critical_failures == ["Privacy Policy Page"]
        assert report.penalties == ["Critical issues detected: -15%"]
        assert report.final_score == 65

    def test_three_critical_failures(self):
        report = self.engine.score(make_checks(**statuses(
            ["HTTPS Redirect", "Privacy Policy Page", "Content Volume"], FAIL
        )))

        assert report.critical_failures == ["HTTPS Redirect", "Privacy Policy Page", "Content Volume"]
        assert report.penalties == ["Critical issues detected: -45%"]
        # 149/209 = 71 -> 26
        assert report.final_score == 26

    def test_secure_connection_is_not_critical(self):
        report = self.engine.score(make_checks(**{"Secure Connection": FAIL}))

        assert report.critical_failures == []
        assert report.penalties == []
        assert report.final_score == 90

    def test_many_non_critical_failures(self):
        failing = [
            "Navigation Structure", "About & Contact", "Mobile Responsiveness",
            "Heading Structure", "Image Optimization", "Page Load Speed", "Error Page Detection",
        ]
        report = self.engine.score(make_checks(**statuses(failing, FAIL)))

        # 160/209 = 77 -> 7 failures -> -6
        assert report.fail_count == 7
        assert report.penalties == ["Multiple failures: -6%"]
        assert report.final_score == 71
        assert report.interpretation == INTERPRETATION_FAIR

    def test_both_penalties(self):
        failing = [
            "Privacy Policy Page", "Content Volume", "Navigation Structure",
            "About & Contact", "Mobile Responsiveness", "Heading Structure",
        ]
        report = self.engine.score(make_checks(**statuses(failing, FAIL)))

        # 127/209 = 61 -> -30 -> -3
        assert report.penalties == ["Critical issues detected: -30%", "Multiple failures: -3%"]
        assert report.final_score == 28

    def test_score_never_negative(self):
        everything = [e.name for e in CHECK_REGISTRY if isinstance(e, CheckSpec)]

        report = self.engine.score(make_checks(**statuses(everything, FAIL)))

        assert report.final_score == 0
        assert report.fail_count == 22

    def test_idempotent(self):
        checks = make_checks(**{"Content Volume": WARN, "Favicon Present": FAIL})
        assert self.engine.score(checks) == self.engine.score(checks)

    @pytest.mark.parametrize(
        "name", [e.name for e in CHECK_REGISTRY if isinstance(e, CheckSpec)]
    )
    def test_improving_a_check_never_lowers_base_score(self, name):
        bases = []
        for status in (FAIL, WARN, PASS):
            report = self.engine.score(make_checks(**{name: status}))
            bases.append(percentage(report.raw_score, report.total_possible_weight))
        assert bases == sorted(bases)


class TestPenaltyEngine:

    def test_custom_policy(self):
        engine = PenaltyEngine(PenaltyConfig(critical_prefixes=("favicon",), critical_cap=50))
        checks = make_checks(**{"Favicon Present": FAIL})

        result = engine.apply(99, checks)

        assert result.critical_failures == ["Favicon Present"]
        assert result.score == 50

    def test_critical_matching_is_case_insensitive(self):
        check = CheckResult("ROBOTS.TXT Configuration", CheckCategory.PERFORMANCE, 12, FAIL, "")
        assert PenaltyEngine().is_critical(check)


class TestInterpretation:

    @pytest.mark.parametrize("score, expected", [
        (100, INTERPRETATION_GOOD),
        (80, INTERPRETATION_GOOD),
        (79, INTERPRETATION_FAIR),
        (60, INTERPRETATION_FAIR),
        (59, INTERPRETATION_POOR),
        (0, INTERPRETATION_POOR),
    ])
    def test_brackets(self, score, expected):
        interpretation, recommendations = interpret(score)
        assert interpretation == expected
        assert len(recommendations) == 4
