"""Language tag resolution.

Selects one language tag from the app language tags for the current request,
based on the URL structure mode, the language tag cookie, the client
language preferences, or a fallback to the default (first) language tag.

Resolution order:
1. The URL (path prefix, subdomain, host, or search param, depending on the mode)
2. The language tag cookie (if enabled)
3. The client preferred language tags (if enabled)
4. The default language tag
"""

from typing import Iterable, Mapping, Optional

from starlette.datastructures import URL, QueryParams
from starlette.requests import HTTPConnection

from wint.i18n.cookies import get_lang_tag_cookie
from wint.i18n.environment import (
    EnvironmentProvider,
    environment_host,
    environment_path,
    environment_preferences,
    environment_query,
    first_present,
    request_header,
    request_url,
)
from wint.i18n.models import DEFAULT_SEARCH_PARAM_KEY, LangTags, UrlMode
from wint.i18n.negotiation import negotiate_lang_tag, synthesize_preferences
from wint.logging import get_module_logger
from wint.operations import OperationResult

logger = get_module_logger()


def _match_prefix(
    tags: LangTags,
    url: Optional[str],
    request: Optional[HTTPConnection],
    environment: Optional[EnvironmentProvider],
) -> Optional[str]:
    effective = first_present(url, request_url(request))
    path = URL(effective).path if effective else environment_path(environment)
    if not path:
        return None
    segments = path.split("/")
    return tags.find(segments[1] if len(segments) > 1 else None)


def _effective_host(
    mode: UrlMode,
    host: Optional[str],
    request: Optional[HTTPConnection],
    environment: Optional[EnvironmentProvider],
) -> Optional[str]:
    url_host = first_present(
        host, request_header(request, "host"), environment_host(environment)
    )
    if not url_host:
        logger.warning("url_host_missing", url_mode=mode.value)
        return None
    return url_host.lower()


def _match_subdomain(tags: LangTags, url_host: Optional[str]) -> Optional[str]:
    if not url_host:
        return None
    return tags.find(url_host.split(".")[0])


def _match_host(
    tags: LangTags,
    url_host: Optional[str],
    lang_tag_hosts: Optional[Mapping[str, str]],
) -> Optional[str]:
    hosts = lang_tag_hosts or {}
    for tag in tags:
        if not hosts.get(tag):
            logger.warning("lang_tag_host_missing", url_mode="host", lang_tag=tag)

    if not url_host:
        return None
    return next(
        (t for t in tags if hosts.get(t) and hosts[t].lower() == url_host), None
    )


def _match_search_param(
    tags: LangTags,
    url: Optional[str],
    search_param_key: Optional[str],
    request: Optional[HTTPConnection],
    environment: Optional[EnvironmentProvider],
) -> Optional[str]:
    effective = first_present(url, request_url(request), environment_query(environment))
    if not effective:
        return None
    key = search_param_key or DEFAULT_SEARCH_PARAM_KEY
    values = QueryParams(URL(effective).query).getlist(key)
    return tags.find(values[0] if values else None)


def _match_cookie(
    tags: LangTags,
    cookie_key: Optional[str],
    cookie: Optional[str],
    request: Optional[HTTPConnection],
    environment: Optional[EnvironmentProvider],
) -> Optional[str]:
    result = get_lang_tag_cookie(
        cookie_key=cookie_key, cookies=cookie, request=request, environment=environment
    )
    if not result.is_success:
        return None
    # The stored cookie is compared as written, without case folding.
    return tags.find(result.data, case_sensitive=True)


def _match_client_preferences(
    tags: LangTags,
    client_preferred_lang_tags: Optional[str],
    request: Optional[HTTPConnection],
    environment: Optional[EnvironmentProvider],
) -> Optional[str]:
    preferences = first_present(
        client_preferred_lang_tags,
        request_header(request, "accept-language"),
        synthesize_preferences(environment_preferences(environment)),
    )
    if not preferences:
        return None
    return negotiate_lang_tag(preferences, tags)


def get_lang_tag(
    lang_tags: Optional[Iterable[str]],
    *,
    url_mode: Optional[str] = None,
    host: Optional[str] = None,
    url: Optional[str] = None,
    search_param_key: Optional[str] = None,
    lang_tag_hosts: Optional[Mapping[str, str]] = None,
    use_cookie: bool = False,
    cookie_key: Optional[str] = None,
    cookie: Optional[str] = None,
    use_client_preferred_lang_tags: bool = False,
    client_preferred_lang_tags: Optional[str] = None,
    request: Optional[HTTPConnection] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> OperationResult:
    """Select a language tag for the current request.

    Each request value (url, host, cookie, preferences) is taken from the
    explicit argument, else from ``request``, else from ``environment``.

    Example:
        Given a request to ``https://es-419.example.com/zh-yue/blog?l=en``
        with the cookie ``lang_tag=zh-Hant-HK`` and the header
        ``Accept-Language: en-US;q=0.8, de;q=0.7, es;q=0.5``, and
        ``tags = ["arb", "en-GB", "zh-Hant-HK", "zh-yue", "es-419", "es", "en"]``:

        - ``get_lang_tag(tags, request=request)`` -> "zh-yue"
        - ``get_lang_tag(tags, url_mode="subdomain", request=request)`` -> "es-419"
        - ``get_lang_tag(tags, url_mode="search-param", request=request)`` -> "en"
        - ``get_lang_tag(tags, url_mode="none", use_cookie=True, request=request)``
          -> "zh-Hant-HK"
        - ``get_lang_tag(tags, url_mode="none",
          use_client_preferred_lang_tags=True, request=request)`` -> "en"

    Args:
        lang_tags: Language tags to choose from; the first is the default.
            Duplicates are dropped.
        url_mode: URL structure mode (default: prefix).
        host: Host, including the port if any (subdomain and host modes).
        url: Path and query string (prefix and search-param modes).
        search_param_key: Query key read in search-param mode (default: "l").
        lang_tag_hosts: Host of each language tag (host mode).
        use_cookie: Fall back to the language tag cookie.
        cookie_key: Cookie name (default: "lang_tag").
        cookie: Cookies in 'Cookie' header syntax.
        use_client_preferred_lang_tags: Fall back to the client preferences.
        client_preferred_lang_tags: Preferences in 'Accept-Language' syntax.
        request: Server request.
        environment: Ambient client state.

    Returns:
        OperationResult with the selected tag as data (the message names the
        stage that selected it), or an INVALID_INPUT result when the tags list
        is empty or contains an empty string.
    """
    validated = LangTags.from_iterable(lang_tags)
    if not validated.is_success:
        logger.error("invalid_lang_tags", lang_tags=list(lang_tags or ()))
        return validated
    tags: LangTags = validated.data

    mode = UrlMode.from_value(url_mode)
    tag: Optional[str] = None

    if mode is UrlMode.PREFIX:
        tag = _match_prefix(tags, url, request, environment)
    elif mode in (UrlMode.SUBDOMAIN, UrlMode.HOST):
        url_host = _effective_host(mode, host, request, environment)
        if mode is UrlMode.SUBDOMAIN:
            tag = _match_subdomain(tags, url_host)
        else:
            tag = _match_host(tags, url_host, lang_tag_hosts)
    elif mode is UrlMode.SEARCH_PARAM:
        tag = _match_search_param(tags, url, search_param_key, request, environment)

    if tag:
        return _resolved(tag, mode.name.lower())

    if use_cookie:
        tag = _match_cookie(tags, cookie_key, cookie, request, environment)
        if tag:
            return _resolved(tag, "cookie")

    if use_client_preferred_lang_tags:
        tag = _match_client_preferences(
            tags, client_preferred_lang_tags, request, environment
        )
        if tag:
            return _resolved(tag, "client_preferences")

    return _resolved(tags.default, "default")


def _resolved(tag: str, source: str) -> OperationResult:
    logger.debug("lang_tag_resolved", lang_tag=tag, source=source)
    return OperationResult.success(data=tag, message=f"resolved_from_{source}")
