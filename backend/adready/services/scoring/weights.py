"""
Check Weights Configuration.

Privacy Policy carries the largest single weight; manual checks weigh 0.
"""

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class CheckWeights:
    """Weight of every automated check (must sum to 209)."""
    # Automated Technical Checks (45 pts)
    secure_connection: int = 20
    https_redirect: int = 15
    ads_txt: int = 10

    # Site Structure & Accessibility (75 pts)
    navigation: int = 10
    privacy_policy: int = 25
    terms_of_service: int = 8
    about_contact: int = 12
    mobile_responsive: int = 10
    language: int = 3
    favicon: int = 2
    error_page: int = 5

    # Content Quality Indicators (38 pts)
    content_volume: int = 20
    social_media: int = 3
    main_content_volume: int = 15

    # Performance & SEO (51 pts)
    title: int = 8
    meta_description: int = 6
    robots_txt: int = 12
    heading_structure: int = 5
    image_alt: int = 4
    load_speed: int = 3
    analytics: int = 7
    structured_data: int = 6


CHECK_WEIGHTS = CheckWeights()

TOTAL_AUTOMATED_WEIGHT = 209

# Scoring version
SCORING_VERSION = "1.0"

# --- Validation (Prevent Drift) ---
def _validate_weights():
    """Ensure weights are non-negative and keep their documented total."""
    values = astuple(CHECK_WEIGHTS)
    if any(value < 0 for value in values):
        raise ValueError("CRITICAL: Check weights must be non-negative")

    total = sum(values)
    if total != TOTAL_AUTOMATED_WEIGHT:
        raise ValueError(f"CRITICAL: Check weights sum to {total}, expected {TOTAL_AUTOMATED_WEIGHT}")

    if CHECK_WEIGHTS.privacy_policy != max(values):
        raise ValueError("CRITICAL: Privacy Policy must carry the highest weight")

_validate_weights()
