"""hreflang alternate links.

Builds the ``<link rel="alternate" hreflang="..." href="...">`` records of a
page, one per language tag plus the ``x-default`` record.

See https://en.wikipedia.org/wiki/Hreflang
"""

from typing import Dict, Mapping, Optional

from starlette.requests import HTTPConnection

from wint.i18n.environment import EnvironmentProvider
from wint.i18n.models import HreflangLink
from wint.i18n.urls import get_path_href
from wint.logging import get_module_logger
from wint.operations import OperationResult

logger = get_module_logger()

X_DEFAULT = "x-default"


def hreflang(
    hrefs: Mapping[str, str],
    x_default_lang_tag: str,
    hreflangs: Optional[Mapping[str, str]] = None,
) -> OperationResult:
    """Build hreflang links from the href of each language tag.

    Example:
        >>> hreflang({"arb": "https://example.com/arb", "en": "https://example.com/en"},
        ...          "arb", hreflangs={"arb": "ar"}).data
        {'hreflang-x-default': HreflangLink(hreflang='x-default', href='https://example.com/arb', rel='alternate'),
         'hreflang-ar': HreflangLink(hreflang='ar', href='https://example.com/arb', rel='alternate'),
         'hreflang-en': HreflangLink(hreflang='en', href='https://example.com/en', rel='alternate')}

    Args:
        hrefs: Language tags mapped to their hrefs.
        x_default_lang_tag: Tag whose href is used for ``x-default``.
        hreflangs: hreflang attribute values to use in place of some tags,
            for tags that are not valid hreflang values.

    Returns:
        OperationResult whose data maps ``hreflang-<value>`` keys to
        HreflangLink, or INVALID_INPUT when the x-default tag is empty or
        missing from ``hrefs``.
    """
    if not x_default_lang_tag:
        logger.error("empty_x_default_lang_tag")
        return OperationResult.invalid_input(
            'The "x-default" language tag cannot be empty.',
            error_code="EMPTY_X_DEFAULT",
        )
    if x_default_lang_tag not in hrefs:
        logger.error("x_default_href_missing", x_default_lang_tag=x_default_lang_tag)
        return OperationResult.invalid_input(
            f'The hrefs must contain the "x-default" language tag "{x_default_lang_tag}".',
            error_code="X_DEFAULT_HREF_MISSING",
        )

    links: Dict[str, HreflangLink] = {
        f"hreflang-{X_DEFAULT}": HreflangLink(
            hreflang=X_DEFAULT, href=hrefs[x_default_lang_tag]
        )
    }
    overrides = hreflangs or {}
    for lang_tag, href in hrefs.items():
        value = overrides.get(lang_tag) or lang_tag
        links[f"hreflang-{value}"] = HreflangLink(hreflang=value, href=href)

    return OperationResult.success(data=links)


def hreflang_paths(
    paths: Mapping[str, str],
    x_default_lang_tag: str,
    *,
    hreflangs: Optional[Mapping[str, str]] = None,
    url_mode: Optional[str] = None,
    host: Optional[str] = None,
    protocol: Optional[str] = None,
    domain: Optional[str] = None,
    lang_tag_hosts: Optional[Mapping[str, str]] = None,
    search_param_key: Optional[str] = None,
    request: Optional[HTTPConnection] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> OperationResult:
    """Build hreflang links from the path of each language tag.

    Each href is built with ``get_path_href``; see it for the meaning of the
    URL options.

    Args:
        paths: Language tags mapped to their (localized) paths,
            e.g. ``{"en": "/blog/recent", "es": "/blog/reciente"}``.
        x_default_lang_tag: Tag whose href is used for ``x-default``.
        hreflangs: hreflang attribute values to use in place of some tags.
        lang_tag_hosts: Host of each language tag (host mode).

    Returns:
        OperationResult as returned by ``hreflang``, or the failed result of
        the first href that could not be built.
    """
    hosts = lang_tag_hosts or {}
    hrefs: Dict[str, str] = {}
    for lang_tag, path in paths.items():
        result = get_path_href(
            path,
            lang_tag,
            url_mode=url_mode,
            host=host,
            protocol=protocol,
            domain=domain,
            lang_tag_host=hosts.get(lang_tag),
            search_param_key=search_param_key,
            request=request,
            environment=environment,
        )
        if not result.is_success:
            return result
        hrefs[lang_tag] = result.data

    return hreflang(hrefs, x_default_lang_tag, hreflangs)
