"""
Document Adapter - Parse page HTML into a queryable document.
"""
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import PreformattedString

from adready.logger import logger
from adready.services.errors import EmptyOrMinimalContent, MalformedDocument

MIN_CONTENT_LENGTH = 100

# Elements whose text is never rendered
INVISIBLE_TAGS = {"script", "style", "noscript", "template"}


def count_words(text: str) -> int:
    """Whitespace-separated tokens longer than two characters."""
    return sum(1 for word in text.split() if len(word) > 2)


class Document:
    """Read-only view over a parsed page."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    # --- element queries ---

    def select(self, selector: str, scope: Optional[Tag] = None) -> List[Tag]:
        return (scope if scope is not None else self.soup).select(selector)

    def select_one(self, selector: str, scope: Optional[Tag] = None) -> Optional[Tag]:
        return (scope if scope is not None else self.soup).select_one(selector)

    def find_all(self, *args, **kwargs) -> List[Tag]:
        return self.soup.find_all(*args, **kwargs)

    @property
    def root(self) -> Optional[Tag]:
        return self.soup.find("html")

    @property
    def body(self) -> Tag:
        return self.soup.body or self.soup

    @property
    def links(self) -> List[Tag]:
        return self.soup.find_all("a")

    # --- accessors ---

    @property
    def title(self) -> Optional[str]:
        title_tag = self.soup.find("title")
        if title_tag is None:
            return None
        return title_tag.get_text(strip=True) or None

    def meta_content(self, name: str) -> Optional[str]:
        """Stripped ``content`` of ``<meta name=...>``, None when absent or empty."""
        tag = self.soup.find("meta", attrs={"name": name})
        if tag is None:
            return None
        return (tag.get("content") or "").strip() or None

    @property
    def lang(self) -> Optional[str]:
        root = self.root
        if root is None:
            return None
        return (root.get("lang") or "").strip() or None

    @staticmethod
    def attr(element: Tag, name: str) -> str:
        """Attribute as a string; multi-valued attributes are space-joined."""
        value = element.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return value

    # --- text extraction ---

    @staticmethod
    def _visible_strings(element: Tag) -> Iterable[str]:
        for string in element.find_all(string=True):
            if isinstance(string, PreformattedString):
                continue
            if any(parent.name in INVISIBLE_TAGS for parent in string.parents):
                continue
            yield string

    def text_of(self, element: Tag) -> str:
        return " ".join(s.strip() for s in self._visible_strings(element) if s.strip())

    def text(self) -> str:
        """Visible text of the whole body."""
        return self.text_of(self.body)

    def word_count(self, element: Optional[Tag] = None) -> int:
        return count_words(self.text_of(element if element is not None else self.body))


def parse_document(html: str) -> Document:
    """Parse HTML into a Document.

    Raises:
        EmptyOrMinimalContent: fewer than 100 characters of markup.
        MalformedDocument: the parser rejected the markup.
    """
    if not html or len(html) < MIN_CONTENT_LENGTH:
        raise EmptyOrMinimalContent(
            "Website returned empty or minimal content.",
            "Please check if the URL is correct."
        )

    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        logger.error(f"HTML parse failed: {e}")
        raise MalformedDocument("Failed to parse website HTML.") from e

    return Document(soup)
