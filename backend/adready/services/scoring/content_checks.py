"""
Content quality checks.
"""
from adready.services.document import Document
from adready.services.scoring.models import CheckContext, Verdict

MAIN_CONTENT_SELECTOR = "article, main, .main, .post, #content"

SOCIAL_PLATFORMS = (
    "facebook.com",
    "twitter.com",
    "instagram.com",
    "linkedin.com",
    "youtube.com",
    "pinterest.com",
    "tiktok.com",
)

# Fixed advisory text for the manual checks
ORIGINALITY_ADVICE = (
    "Ensure all content is original, well-written, and provides value to users. "
    "No copied content allowed."
)
POLICY_ADVICE = (
    "Verify content complies with AdSense policies: no adult content, violence, "
    "illegal activities, etc."
)
UX_ADVICE = "Ensure professional design, easy navigation, fast loading, and good user experience."


def check_content_volume(ctx: CheckContext) -> Verdict:
    words = ctx.document.word_count()

    if words > 1500:
        return Verdict.passed(f"Good content volume (~{words} words).")
    if words > 800:
        return Verdict.warned(
            f"Moderate content (~{words} words). AdSense prefers sites with "
            "substantial content (1500+ words per page)."
        )
    if words > 300:
        return Verdict.failed(
            f"Low content volume (~{words} words). AdSense requires substantial, valuable content."
        )
    return Verdict.failed(
        f"Insufficient content (~{words} words). AdSense typically rejects sites with minimal content."
    )


def check_social_media(ctx: CheckContext) -> Verdict:
    social_links = [
        link for link in ctx.document.links
        if any(platform in Document.attr(link, "href").lower() for platform in SOCIAL_PLATFORMS)
    ]
    count = len(social_links)

    if count >= 2:
        return Verdict.passed(f"Social media links found ({count}). Good for trust signals.")
    if count == 1:
        return Verdict.warned("Limited social media presence. Consider adding more platforms.")
    return Verdict.warned("No social media links found. Consider adding for trust signals.")


def check_main_content_volume(ctx: CheckContext) -> Verdict:
    doc = ctx.document
    main = doc.select_one(MAIN_CONTENT_SELECTOR)
    words = doc.word_count(main if main is not None else doc.body)

    if words > 1000:
        return Verdict.passed(f"Excellent main content volume (~{words} words).")
    if words > 500:
        return Verdict.warned(f"Sufficient main content (~{words} words), but more is better for AdSense.")
    return Verdict.failed(f"Low main content volume (~{words} words). This is a major red flag for AdSense.")
