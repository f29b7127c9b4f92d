"""
Automated technical checks: transport security and ads.txt.
"""
from urllib.parse import urlparse

from adready.services.scoring.models import CheckContext, Verdict


def check_secure_connection(ctx: CheckContext) -> Verdict:
    if urlparse(ctx.retrieval.final_url).scheme == "https":
        return Verdict.passed("Site uses HTTPS encryption.")
    return Verdict.failed("Site does not use HTTPS. This is CRITICAL for AdSense approval.")


def check_https_redirect(ctx: CheckContext) -> Verdict:
    initial = urlparse(ctx.requested_url)
    final = urlparse(ctx.retrieval.final_url)

    if initial.scheme == "http" and final.scheme == "https" and initial.hostname == final.hostname:
        return Verdict.passed("HTTP correctly redirects to HTTPS.")
    if final.scheme == "https":
        return Verdict.passed("Site uses HTTPS.")
    return Verdict.failed("No HTTP to HTTPS redirect configured.")


def check_ads_txt(ctx: CheckContext) -> Verdict:
    ads_txt = ctx.ads_txt
    if not ads_txt.exists:
        if ads_txt.failure in ("timeout", "network"):
            return Verdict.warned("Could not analyze ads.txt due to a network error.")
        return Verdict.warned("ads.txt file not found. This is recommended for all publishers.")

    if ads_txt.has_google_publisher:
        return Verdict.passed(
            f"ads.txt file found with Google publisher ID ({', '.join(ads_txt.publisher_ids)})."
        )
    return Verdict.warned("ads.txt file found, but it does not appear to contain a Google publisher ID.")
