"""Href building for language tags.

Builds the absolute URL (href) of a path for a given language tag,
according to the URL structure mode of the app.
"""

from typing import Optional
from urllib.parse import parse_qsl, urlencode

from starlette.datastructures import URL
from starlette.requests import HTTPConnection

from wint.i18n.environment import (
    EnvironmentProvider,
    environment_host,
    environment_protocol,
    first_present,
    request_header,
)
from wint.i18n.models import DEFAULT_PROTOCOL, DEFAULT_SEARCH_PARAM_KEY, UrlMode
from wint.logging import get_module_logger
from wint.operations import OperationResult

logger = get_module_logger()


def normalize_path(path: Optional[str]) -> str:
    """Give a non-empty path a leading slash."""
    if not path:
        return ""
    return path if path.startswith("/") else f"/{path}"


def set_query_param(url: URL, key: str, value: str) -> URL:
    """Set ``key`` in the query of ``url``.

    The first occurrence keeps its position and takes the new value, later
    occurrences are dropped, and a missing key is appended.
    """
    params = []
    replaced = False
    for name, current in parse_qsl(url.query, keep_blank_values=True):
        if name != key:
            params.append((name, current))
        elif not replaced:
            params.append((name, value))
            replaced = True
    if not replaced:
        params.append((key, value))
    return url.replace(query=urlencode(params))


def get_path_href(
    path: Optional[str],
    lang_tag: str,
    *,
    url_mode: Optional[str] = None,
    host: Optional[str] = None,
    protocol: Optional[str] = None,
    domain: Optional[str] = None,
    lang_tag_host: Optional[str] = None,
    search_param_key: Optional[str] = None,
    request: Optional[HTTPConnection] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> OperationResult:
    """Build an href for a language tag from a path.

    Example:
        With ``path="/blog/recent?key=value"`` and ``lang_tag="en"``:

        - prefix, host "example.com":
          ``https://example.com/en/blog/recent?key=value``
        - subdomain, domain "example.com":
          ``https://en.example.com/blog/recent?key=value``
        - host, lang_tag_host "example-en.com":
          ``https://example-en.com/blog/recent?key=value``
        - search-param, host "example.com":
          ``https://example.com/blog/recent?key=value&l=en``
        - none, host "example.com":
          ``https://example.com/blog/recent?key=value``

    Args:
        path: URL path, optionally with a query string.
        lang_tag: The language tag the href is built for.
        url_mode: URL structure mode (default: prefix).
        host: App host, including the port if any. Needed in prefix,
            search-param and none modes. Defaults to the request 'Host'
            header, then to the environment host.
        protocol: URL protocol. Defaults to the environment protocol, then
            to "https".
        domain: Domain under which the tag is a subdomain. Needed in
            subdomain mode.
        lang_tag_host: Host of ``lang_tag``. Needed in host mode.
        search_param_key: Query key used in search-param mode (default: "l").
        request: Server request.
        environment: Ambient client state.

    Returns:
        OperationResult with the href as data, INVALID_INPUT for an empty
        tag, or MISSING_CONTEXT when the mode lacks a required value.
    """
    if not lang_tag:
        logger.error("empty_lang_tag", operation="get_path_href")
        return OperationResult.invalid_input(
            "The provided language tag cannot be empty.", error_code="EMPTY_LANG_TAG"
        )

    url_path = normalize_path(path)
    prot = first_present(protocol, environment_protocol(environment)) or DEFAULT_PROTOCOL
    mode = UrlMode.from_value(url_mode)

    if mode.needs_host:
        url_host = first_present(
            host, request_header(request, "host"), environment_host(environment)
        )
        if not url_host:
            logger.error("url_host_missing", url_mode=mode.value)
            return OperationResult.missing_context(
                f'"{mode.value}" mode: No URL host provided, and none available '
                "from the request or the environment.",
                error_code="HOST_MISSING",
            )

        if mode is UrlMode.PREFIX:
            return OperationResult.success(
                data=f"{prot}://{url_host}/{lang_tag}{url_path}"
            )

        if mode is UrlMode.SEARCH_PARAM:
            key = search_param_key or DEFAULT_SEARCH_PARAM_KEY
            url = URL(f"{prot}://{url_host}{url_path}")
            return OperationResult.success(
                data=str(set_query_param(url, key, lang_tag))
            )

        return OperationResult.success(data=f"{prot}://{url_host}{url_path}")

    if mode is UrlMode.SUBDOMAIN:
        if not domain:
            logger.error("url_domain_missing", url_mode=mode.value)
            return OperationResult.missing_context(
                f'"{mode.value}" mode: No domain provided.',
                error_code="DOMAIN_MISSING",
            )
        return OperationResult.success(data=f"{prot}://{lang_tag}.{domain}{url_path}")

    if not lang_tag_host:
        logger.error("lang_tag_host_missing", url_mode=mode.value, lang_tag=lang_tag)
        return OperationResult.missing_context(
            f'"{mode.value}" mode: The language tag "{lang_tag}" has no host.',
            error_code="LANG_TAG_HOST_MISSING",
        )
    return OperationResult.success(data=f"{prot}://{lang_tag_host}{url_path}")
