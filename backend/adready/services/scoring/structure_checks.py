"""
Site structure & accessibility checks.

Link lookups match keywords against the raw ``href`` and the visible link
text, both lowercased.
"""
from typing import Optional, Sequence

from bs4 import Tag

from adready.services.document import Document
from adready.services.scoring.models import CheckContext, Verdict

NAV_SELECTOR = "nav, header nav, .nav, .navigation, .menu"
NAV_FALLBACK_SELECTOR = "header a, .menu a"

PRIVACY_KEYWORDS = ("privacy", "policy")
TERMS_KEYWORDS = ("terms", "conditions", "/tos")
ABOUT_KEYWORDS = ("about",)
CONTACT_KEYWORDS = ("contact",)

ICON_RELS = {"icon", "apple-touch-icon"}

ERROR_PAGE_PHRASES = (
    "404",
    "page not found",
    "not found",
    "does not exist",
    "server error",
    "an error occurred",
)


def find_link(document: Document, keywords: Sequence[str]) -> Optional[Tag]:
    """First link whose href or text contains any keyword."""
    for link in document.links:
        href = Document.attr(link, "href").lower()
        text = link.get_text(" ", strip=True).lower()
        if any(keyword in href or keyword in text for keyword in keywords):
            return link
    return None


def check_navigation(ctx: CheckContext) -> Verdict:
    doc = ctx.document
    nav = doc.select_one(NAV_SELECTOR)
    nav_links = doc.select("a", scope=nav) if nav is not None else doc.select(NAV_FALLBACK_SELECTOR)
    count = len(nav_links)

    if count >= 5:
        return Verdict.passed(f"Clear navigation with {count} links found.")
    if count >= 3:
        return Verdict.warned(f"Navigation found with {count} links. Consider adding more sections.")
    return Verdict.failed("Insufficient navigation structure. Add clear menu with multiple sections.")


def check_privacy_policy(ctx: CheckContext) -> Verdict:
    if find_link(ctx.document, PRIVACY_KEYWORDS) is not None:
        return Verdict.passed("Privacy Policy link found - REQUIRED for AdSense.")
    return Verdict.failed("Privacy Policy page missing - CRITICAL REQUIREMENT for AdSense approval.")


def check_terms_of_service(ctx: CheckContext) -> Verdict:
    if find_link(ctx.document, TERMS_KEYWORDS) is not None:
        return Verdict.passed("Terms of Service page found.")
    return Verdict.warned("Terms of Service page recommended for trust signals.")


def check_about_contact(ctx: CheckContext) -> Verdict:
    has_about = find_link(ctx.document, ABOUT_KEYWORDS) is not None
    has_contact = find_link(ctx.document, CONTACT_KEYWORDS) is not None

    if has_about and has_contact:
        return Verdict.passed("Both About and Contact pages found.")
    if has_about or has_contact:
        missing = "Contact" if has_about else "About"
        return Verdict.warned(f"Missing {missing} page. Both recommended.")
    return Verdict.failed("Both About and Contact pages missing - important for trust.")


def _is_media_query(media: str) -> bool:
    """True for conditional media such as '(max-width: 600px)'; plain media types do not count."""
    media = media.lower()
    return "(" in media or "width" in media


def _has_responsive_css(doc: Document) -> bool:
    for style in doc.find_all("style"):
        if "@media" in (style.string or ""):
            return True
    for link in doc.find_all("link"):
        rels = Document.attr(link, "rel").lower().split()
        if "stylesheet" not in rels:
            continue
        if _is_media_query(Document.attr(link, "media")) or "media" in Document.attr(link, "href").lower():
            return True
    return False


def check_mobile_responsiveness(ctx: CheckContext) -> Verdict:
    viewport = (ctx.document.meta_content("viewport") or "").lower().replace(" ", "")

    if "width=device-width" in viewport:
        if _has_responsive_css(ctx.document):
            return Verdict.passed("Mobile-optimized with viewport tag and responsive CSS.")
        return Verdict.warned("Viewport tag found but responsive CSS unclear.")
    return Verdict.failed("Missing viewport meta tag - essential for mobile users.")


def check_language(ctx: CheckContext) -> Verdict:
    lang = ctx.document.lang
    if lang:
        return Verdict.passed(f'Language declared as "{lang}".')
    return Verdict.warned("No language declaration. Add lang attribute to <html> tag.")


def check_favicon(ctx: CheckContext) -> Verdict:
    for link in ctx.document.find_all("link"):
        rels = set(Document.attr(link, "rel").lower().split())
        if rels & ICON_RELS and Document.attr(link, "href").strip():
            return Verdict.passed("Favicon found - good for branding.")
    return Verdict.warned("Favicon missing. Add for professional appearance.")


def check_error_page(ctx: CheckContext) -> Verdict:
    text = ctx.document.text().lower()
    found = [phrase for phrase in ERROR_PAGE_PHRASES if phrase in text]

    if found:
        return Verdict.failed(f'Potential error page or broken content detected ("{found[0]}").')
    return Verdict.passed("No obvious error indicators found.")
