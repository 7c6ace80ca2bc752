"""Language tag models.

Defines the core data structures used when resolving a language tag and
expressing it in a URL, a cookie, or a set of hreflang links.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from wint.operations import OperationResult

DEFAULT_COOKIE_KEY = "lang_tag"
DEFAULT_SEARCH_PARAM_KEY = "l"
DEFAULT_PROTOCOL = "https"


class UrlMode(str, Enum):
    """Part of the app URL that carries the language tag.

    Examples:
        PREFIX: ``example.com/es``, ``example.com/en-GB``
        SUBDOMAIN: ``es.example.com``, ``en-GB.example.com``
        HOST: each tag has its own host (``example.es``, ``localhost:8001``)
        SEARCH_PARAM: ``example.com?l=es``
        NONE: the same URL is used for every tag
    """

    PREFIX = "prefix"
    SUBDOMAIN = "subdomain"
    HOST = "host"
    SEARCH_PARAM = "search-param"
    NONE = "none"

    @classmethod
    def from_value(cls, value: Any) -> "UrlMode":
        """Map any value to a UrlMode.

        Unknown, empty or missing values map to PREFIX, so the result is
        always one of the five modes.

        Args:
            value: A UrlMode, a mode string (e.g. "search-param") or None.

        Returns:
            Matching UrlMode, or UrlMode.PREFIX.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.PREFIX

    @property
    def needs_host(self) -> bool:
        """Whether building an href in this mode needs the app host."""
        return self in (UrlMode.PREFIX, UrlMode.SEARCH_PARAM, UrlMode.NONE)


@dataclass(frozen=True)
class LangTags:
    """Ordered, deduplicated, non-empty list of language tags.

    The first tag is the default app language tag. Build instances with
    ``from_iterable`` so the list is validated.

    Attributes:
        tags: The language tags, in first-seen order.
    """

    tags: Tuple[str, ...]

    @classmethod
    def from_iterable(cls, tags: Optional[Iterable[str]]) -> OperationResult:
        """Validate and deduplicate a list of language tags.

        Args:
            tags: Language tags; the first one is the default.

        Returns:
            OperationResult with a LangTags instance as data, or an
            INVALID_INPUT result when the list is empty or contains an
            empty string.
        """
        unique = tuple(dict.fromkeys(tags or ()))
        if not unique or "" in unique:
            return OperationResult.invalid_input(
                "The language tags list cannot be empty or contain an empty string.",
                error_code="INVALID_LANG_TAGS",
            )
        return OperationResult.success(data=cls(tags=unique))

    @property
    def default(self) -> str:
        """The default language tag (first element)."""
        return self.tags[0]

    def find(self, value: Optional[str], case_sensitive: bool = False) -> Optional[str]:
        """Find the tag matching ``value``.

        Args:
            value: Candidate string taken from a URL, host or cookie.
            case_sensitive: Require an exact match instead of a
                case-insensitive one.

        Returns:
            The tag as declared in the list, or None.
        """
        if not value:
            return None
        if case_sensitive:
            return value if value in self.tags else None
        lowered = value.lower()
        return next((t for t in self.tags if t.lower() == lowered), None)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags


@dataclass(frozen=True)
class CookieOptions:
    """Attributes serialized with the language tag cookie.

    Attributes:
        max_age: Max-Age in seconds.
        expires: Expiry date, or a preformatted HTTP date string.
        path: Path attribute.
        domain: Domain attribute.
        secure: Add the Secure flag.
        http_only: Add the HttpOnly flag.
        same_site: "lax", "strict", "none" (any case), or True for Strict.
    """

    max_age: Optional[int] = None
    expires: Optional[Union[datetime, str]] = None
    path: Optional[str] = None
    domain: Optional[str] = None
    secure: bool = False
    http_only: bool = False
    same_site: Optional[Union[str, bool]] = None


@dataclass(frozen=True)
class HreflangLink:
    """An hreflang alternate link.

    Attributes:
        hreflang: The ``hreflang`` attribute value (a tag, or "x-default").
        href: The absolute URL of the alternate page.
        rel: Always "alternate".
    """

    hreflang: str
    href: str
    rel: str = "alternate"

    def to_dict(self) -> dict:
        """Return the link attributes, e.g. for a template or JSON payload."""
        return {"rel": self.rel, "hreflang": self.hreflang, "href": self.href}
