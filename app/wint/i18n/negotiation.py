"""Client language preference negotiation.

Picks the language tag that best satisfies an 'Accept-Language' style
preference list (RFC 7231 section 5.3.5), using quality values and
language range specificity.
"""

import math
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

# "en-US;q=0.8" -> prefix "en", suffix "US", params "q=0.8"
_LANGUAGE_RE = re.compile(r"^\s*([^\s\-;]+)(?:-([^\s;]+))?\s*(?:;(.*))?$")


@dataclass(frozen=True)
class LanguageRange:
    """One entry of a preference list.

    Attributes:
        prefix: Primary subtag, e.g. "en".
        full: Whole range, e.g. "en-US".
        q: Quality value.
        index: Position in the preference list.
    """

    prefix: str
    full: str
    q: float
    index: int


@dataclass(frozen=True)
class _Priority:
    q: float
    specificity: int
    order: int
    index: int


def parse_language_range(value: str, index: int = 0) -> Optional[LanguageRange]:
    """Parse a single language range, e.g. "en-US;q=0.8".

    Returns:
        LanguageRange, or None if the value is not a language range.
    """
    match = _LANGUAGE_RE.match(value)
    if not match:
        return None
    prefix, suffix, params = match.groups()
    full = f"{prefix}-{suffix}" if suffix else prefix

    q = 1.0
    for param in (params or "").split(";"):
        name, _, raw = param.strip().partition("=")
        if name == "q":
            try:
                q = float(raw)
            except ValueError:
                q = math.nan
    return LanguageRange(prefix=prefix, full=full, q=q, index=index)


def parse_accept_language(header: Optional[str]) -> List[LanguageRange]:
    """Parse an 'Accept-Language' header value.

    Entries that are not language ranges are skipped.

    Example:
        "en-US,en;q=0.9,fr;q=0.8" -> [en-US (1.0), en (0.9), fr (0.8)]
    """
    ranges = []
    for index, part in enumerate((header or "").split(",")):
        parsed = parse_language_range(part.strip(), index)
        if parsed is not None:
            ranges.append(parsed)
    return ranges


def _specify(lang_tag: str, preference: LanguageRange, index: int) -> Optional[_Priority]:
    tag = parse_language_range(lang_tag)
    if tag is None:
        return None
    full = tag.full.lower()
    if preference.full.lower() == full:
        specificity = 4
    elif preference.prefix.lower() == full:
        specificity = 2
    elif preference.full.lower() == tag.prefix.lower():
        specificity = 1
    elif preference.full == "*":
        specificity = 0
    else:
        return None
    return _Priority(
        q=preference.q, specificity=specificity, order=preference.index, index=index
    )


def _priority(lang_tag: str, accepted: Sequence[LanguageRange], index: int) -> _Priority:
    best = _Priority(q=0.0, specificity=0, order=-1, index=index)
    for preference in accepted:
        candidate = _specify(lang_tag, preference, index)
        if candidate is None:
            continue
        if (candidate.specificity, candidate.q, candidate.order) > (
            best.specificity,
            best.q,
            best.order,
        ):
            best = candidate
    return best


def preferred_lang_tags(
    preferences: Optional[str], lang_tags: Iterable[str]
) -> List[str]:
    """Order ``lang_tags`` by how well they satisfy ``preferences``.

    Tags not accepted by any preference, or accepted with a zero quality,
    are left out.

    Args:
        preferences: Preference list in 'Accept-Language' syntax.
        lang_tags: Candidate language tags, in app order.

    Returns:
        Acceptable tags, best first. Ties keep the preference order, then
        the app order.
    """
    accepted = parse_accept_language(preferences)
    tags = list(lang_tags)
    priorities = [_priority(tag, accepted, i) for i, tag in enumerate(tags)]
    acceptable = [p for p in priorities if p.q > 0]
    acceptable.sort(key=lambda p: (-p.q, -p.specificity, p.order, p.index))
    return [tags[p.index] for p in acceptable]


def negotiate_lang_tag(
    preferences: Optional[str], lang_tags: Iterable[str]
) -> Optional[str]:
    """Pick the tag that best satisfies the client preferences.

    Example:
        >>> negotiate_lang_tag("en-US;q=0.8, de;q=0.7, es;q=0.5", ["arb", "es", "en"])
        'en'

    Returns:
        The best tag, or None when no tag is acceptable.
    """
    preferred = preferred_lang_tags(preferences, lang_tags)
    return preferred[0] if preferred else None


def synthesize_preferences(languages: Sequence[str]) -> Optional[str]:
    """Build an 'Accept-Language' value from an ordered list of languages.

    Each language gets a strictly lower quality than the previous one, with
    at most three decimals: ``q = floor(1000 * (1 - i / n)) / 1000``.

    Example:
        ["en-US", "de", "es"] -> "en-US;q=1, de;q=0.666, es;q=0.333"
    """
    languages = [lang for lang in languages if lang]
    if not languages:
        return None
    unit = 1 / len(languages)
    parts = []
    for i, lang in enumerate(languages):
        q = math.floor(1000 * (1 - i * unit)) / 1000
        parts.append(f"{lang};q={q:g}")
    return ", ".join(parts)
