"""
Performance & SEO checks.
"""
from adready.services.collectors.schema_collector import SchemaCollector
from adready.services.document import Document
from adready.services.scoring.models import CheckContext, Verdict

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160

FAST_RESPONSE_MS = 3000
MODERATE_RESPONSE_MS = 5000

ANALYTICS_SRC_SIGNATURES = (
    "googletagmanager.com/gtag/js",
    "googletagmanager.com/gtm.js",
    "google-analytics.com/analytics.js",
    "google-analytics.com/ga.js",
)
ANALYTICS_INLINE_SIGNATURES = (
    "ga-lite",
    "ga('create',",
    "gtag('config',",
    'gtag("config",',
    "googletagmanager.com/gtm.js",
)


def check_title(ctx: CheckContext) -> Verdict:
    title = ctx.document.title
    if not title:
        return Verdict.failed("Missing title tag - critical for SEO.")

    length = len(title)
    if length < TITLE_MIN_LENGTH:
        return Verdict.failed(f"Title too short ({length} chars). Should be 15-60 characters.")
    if length > TITLE_MAX_LENGTH:
        return Verdict.warned(
            f"Title too long ({length} chars). Consider shortening to under 60 characters."
        )
    return Verdict.passed(f'Good title length: "{title}" ({length} chars)')


def check_meta_description(ctx: CheckContext) -> Verdict:
    description = ctx.document.meta_content("description")
    if not description:
        return Verdict.failed("Missing meta description - important for SEO.")

    length = len(description)
    if length < DESCRIPTION_MIN_LENGTH:
        return Verdict.warned(f"Meta description short ({length} chars). Consider 150-160 characters.")
    if length > DESCRIPTION_MAX_LENGTH:
        return Verdict.warned(
            f"Meta description long ({length} chars). May be truncated in search results."
        )
    return Verdict.passed(f"Good meta description length ({length} chars).")


def check_robots_txt(ctx: CheckContext) -> Verdict:
    robots = ctx.robots
    if not robots.exists:
        if robots.failure in ("timeout", "network"):
            return Verdict.warned("Could not analyze robots.txt due to network error.")
        return Verdict.warned("robots.txt not found. Consider adding one for better SEO.")

    if robots.blocks_crawlers:
        return Verdict.failed(
            "robots.txt blocks search engine crawlers - this will prevent AdSense approval."
        )
    if robots.has_sitemap:
        return Verdict.passed("robots.txt configured correctly with sitemap reference.")
    return Verdict.warned("robots.txt allows crawling but consider adding sitemap reference.")


def check_heading_structure(ctx: CheckContext) -> Verdict:
    h1_count = len(ctx.document.find_all("h1"))
    heading_count = len(ctx.document.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]))

    if h1_count == 1 and heading_count >= 3:
        return Verdict.passed(f"Good heading structure: 1 H1, {heading_count} total headings.")
    if h1_count == 1:
        return Verdict.warned("H1 found but consider adding more subheadings (H2, H3).")
    if h1_count > 1:
        return Verdict.warned(f"Multiple H1 tags found ({h1_count}). Use only one H1 per page.")
    return Verdict.warned("No H1 heading found. Add proper heading structure.")


def check_image_alt(ctx: CheckContext) -> Verdict:
    images = ctx.document.find_all("img")
    if not images:
        return Verdict.warned("No images found. Visual content improves user engagement.")

    with_alt = sum(1 for img in images if Document.attr(img, "alt").strip())
    ratio = with_alt / len(images) * 100

    if ratio >= 80:
        return Verdict.passed(
            f"Good image accessibility: {with_alt}/{len(images)} images have alt text."
        )
    if ratio >= 50:
        return Verdict.warned(
            f"Some images missing alt text: {with_alt}/{len(images)}. Add for accessibility."
        )
    return Verdict.failed(
        f"Poor image accessibility: only {with_alt}/{len(images)} images have alt text."
    )


def check_load_speed(ctx: CheckContext) -> Verdict:
    elapsed = ctx.retrieval.elapsed_ms

    if elapsed < FAST_RESPONSE_MS:
        return Verdict.passed(f"Good response time: {elapsed}ms")
    if elapsed < MODERATE_RESPONSE_MS:
        return Verdict.warned(f"Moderate response time: {elapsed}ms. Consider optimization.")
    return Verdict.failed(f"Slow response time: {elapsed}ms. Optimize for better user experience.")


def check_analytics(ctx: CheckContext) -> Verdict:
    for script in ctx.document.find_all("script"):
        src = Document.attr(script, "src").lower()
        inline = script.string or ""
        if any(sig in src for sig in ANALYTICS_SRC_SIGNATURES) or any(
            sig in inline for sig in ANALYTICS_INLINE_SIGNATURES
        ):
            return Verdict.passed(
                "Google Analytics script detected. This is a good sign of a well-managed site."
            )
    return Verdict.warned(
        "Google Analytics script not found. Tracking site traffic is highly recommended."
    )


def check_structured_data(ctx: CheckContext) -> Verdict:
    schema = SchemaCollector().collect(ctx.document)
    if not schema.has_any:
        return Verdict.warned("No structured data (JSON-LD) found. Consider adding it to improve SEO.")

    found = ", ".join(schema.types) if schema.types else "unrecognized types"
    return Verdict.passed(f"Structured data (JSON-LD) found: {found}.")
