"""
Check Registry - Ordered declaration of every check and the harness that runs them.

Each automated entry pairs a name, category and weight with a predicate
taking a CheckContext. Manual entries carry fixed advisory text and are
never evaluated. run_check always yields exactly one CheckResult per entry.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from adready.logger import logger
from adready.services.scoring import content_checks as content
from adready.services.scoring import performance_checks as performance
from adready.services.scoring import structure_checks as structure
from adready.services.scoring import technical_checks as technical
from adready.services.scoring.models import (
    CheckCategory,
    CheckContext,
    CheckResult,
    CheckStatus,
    Verdict,
)
from adready.services.scoring.weights import CHECK_WEIGHTS as W

Predicate = Callable[[CheckContext], Verdict]


@dataclass(frozen=True)
class CheckSpec:
    """An automated, weighted check."""
    name: str
    category: CheckCategory
    weight: int
    predicate: Predicate


@dataclass(frozen=True)
class ManualCheck:
    """A zero-weight advisory entry that needs human review."""
    name: str
    category: CheckCategory
    message: str
    weight: int = 0


RegistryEntry = Union[CheckSpec, ManualCheck]


def run_check(entry: RegistryEntry, context: CheckContext) -> CheckResult:
    """Evaluate one registry entry; predicate errors become a fail result."""
    if isinstance(entry, ManualCheck):
        return CheckResult(entry.name, entry.category, 0, CheckStatus.MANUAL, entry.message)

    try:
        verdict = entry.predicate(context)
        status = CheckStatus(verdict.status)
    except Exception as e:
        logger.warning(f"Check '{entry.name}' raised {e.__class__.__name__}: {e}")
        return CheckResult(entry.name, entry.category, entry.weight, CheckStatus.FAIL, f"Check failed: {e}")

    return CheckResult(entry.name, entry.category, entry.weight, status, verdict.message)


def run_checks(context: CheckContext, registry: Optional[Sequence[RegistryEntry]] = None) -> List[CheckResult]:
    """Run every entry in declaration order."""
    entries = CHECK_REGISTRY if registry is None else registry
    return [run_check(entry, context) for entry in entries]


AUTO = CheckCategory.AUTOMATED
STRUCT = CheckCategory.STRUCTURE
CONTENT = CheckCategory.CONTENT
PERF = CheckCategory.PERFORMANCE

CHECK_REGISTRY: tuple[RegistryEntry, ...] = (
    CheckSpec("Secure Connection", AUTO, W.secure_connection, technical.check_secure_connection),
    CheckSpec("HTTPS Redirect", AUTO, W.https_redirect, technical.check_https_redirect),
    CheckSpec("SEO Title Tag", PERF, W.title, performance.check_title),
    CheckSpec("Meta Description", PERF, W.meta_description, performance.check_meta_description),
    CheckSpec("Robots.txt Configuration", PERF, W.robots_txt, performance.check_robots_txt),
    CheckSpec("Navigation Structure", STRUCT, W.navigation, structure.check_navigation),
    CheckSpec("Privacy Policy Page", STRUCT, W.privacy_policy, structure.check_privacy_policy),
    CheckSpec("Terms of Service Page", STRUCT, W.terms_of_service, structure.check_terms_of_service),
    CheckSpec("About & Contact", STRUCT, W.about_contact, structure.check_about_contact),
    CheckSpec("Mobile Responsiveness", STRUCT, W.mobile_responsive, structure.check_mobile_responsiveness),
    CheckSpec("Content Volume", CONTENT, W.content_volume, content.check_content_volume),
    CheckSpec("Heading Structure", PERF, W.heading_structure, performance.check_heading_structure),
    CheckSpec("Image Optimization", PERF, W.image_alt, performance.check_image_alt),
    CheckSpec("Language Declaration", STRUCT, W.language, structure.check_language),
    CheckSpec("Favicon Present", STRUCT, W.favicon, structure.check_favicon),
    CheckSpec("Page Load Speed", PERF, W.load_speed, performance.check_load_speed),
    CheckSpec("Error Page Detection", STRUCT, W.error_page, structure.check_error_page),
    CheckSpec("Social Media Integration", CONTENT, W.social_media, content.check_social_media),
    CheckSpec("Analytics Installed", PERF, W.analytics, performance.check_analytics),
    CheckSpec("Ads.txt Presence", AUTO, W.ads_txt, technical.check_ads_txt),
    CheckSpec("Structured Data", PERF, W.structured_data, performance.check_structured_data),
    CheckSpec("Main Content Volume", CONTENT, W.main_content_volume, content.check_main_content_volume),
    ManualCheck("Content Originality & Quality", CONTENT, content.ORIGINALITY_ADVICE),
    ManualCheck("Content Policy Compliance", CONTENT, content.POLICY_ADVICE),
    ManualCheck("User Experience & Site Design", CONTENT, content.UX_ADVICE),
)
