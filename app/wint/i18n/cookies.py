"""Language tag cookie codec.

Reads the language tag cookie from a 'Cookie' header string, and writes it
as a 'Set-Cookie' header to a server response or to the environment.
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from http.cookies import CookieError, SimpleCookie
from typing import Dict, Optional

from starlette.requests import HTTPConnection, cookie_parser
from starlette.responses import Response

from wint.i18n.environment import (
    CookieWriter,
    EnvironmentProvider,
    environment_cookies,
    first_present,
    request_header,
)
from wint.i18n.models import DEFAULT_COOKIE_KEY, CookieOptions
from wint.logging import get_module_logger
from wint.operations import OperationResult

logger = get_module_logger()

_SAME_SITE_VALUES = {"lax": "Lax", "strict": "Strict", "none": "None"}


def parse_cookie_header(cookies: Optional[str]) -> Dict[str, str]:
    """Parse a string in 'Cookie' header syntax into a dict."""
    if not cookies:
        return {}
    return cookie_parser(cookies)


def get_lang_tag_cookie(
    *,
    cookie_key: Optional[str] = None,
    cookies: Optional[str] = None,
    request: Optional[HTTPConnection] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> OperationResult:
    """Get the value of the language tag cookie.

    The cookie string is taken from ``cookies``, else from the request
    'Cookie' header, else from the environment.

    Args:
        cookie_key: Cookie name (default: "lang_tag").
        cookies: Cookies in 'Cookie' header syntax,
            e.g. "lang_tag=en; strawberry_cookie=tasty".
        request: Server request.
        environment: Ambient client state.

    Returns:
        OperationResult with the cookie value as data, or a NOT_FOUND result
        when no cookie string is available or the cookie is not set.
    """
    key = cookie_key or DEFAULT_COOKIE_KEY
    cookie_string = first_present(
        cookies,
        request_header(request, "cookie"),
        environment_cookies(environment),
    )
    value = parse_cookie_header(cookie_string).get(key)
    if not value:
        return OperationResult.not_found(
            f"The '{key}' cookie is not set.", error_code="COOKIE_NOT_FOUND"
        )
    return OperationResult.success(data=value)


def _same_site(value) -> Optional[str]:
    if value is True:
        return "Strict"
    if not value:
        return None
    normalized = _SAME_SITE_VALUES.get(str(value).lower())
    if normalized is None:
        raise CookieError(f"Invalid SameSite value: {value!r}")
    return normalized


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def serialize_lang_tag_cookie(
    lang_tag: str,
    cookie_key: Optional[str] = None,
    cookie_options: Optional[CookieOptions] = None,
) -> str:
    """Serialize the language tag cookie in 'Set-Cookie' header syntax.

    Attributes are written in a fixed order, so equal inputs always give the
    same string.

    Raises:
        CookieError: If the key or an attribute value is not allowed.
    """
    key = cookie_key or DEFAULT_COOKIE_KEY
    options = cookie_options or CookieOptions()

    cookie: SimpleCookie = SimpleCookie()
    cookie[key] = lang_tag
    morsel = cookie[key]
    if options.max_age is not None:
        morsel["max-age"] = int(options.max_age)
    if options.expires is not None:
        expires = options.expires
        if isinstance(expires, datetime):
            expires = format_datetime(_as_utc(expires), usegmt=True)
        morsel["expires"] = expires
    if options.path:
        morsel["path"] = options.path
    if options.domain:
        morsel["domain"] = options.domain
    if options.secure:
        morsel["secure"] = True
    if options.http_only:
        morsel["httponly"] = True
    same_site = _same_site(options.same_site)
    if same_site:
        morsel["samesite"] = same_site
    return morsel.OutputString()


def set_lang_tag_cookie(
    lang_tag: str,
    *,
    cookie_key: Optional[str] = None,
    cookie_options: Optional[CookieOptions] = None,
    response: Optional[Response] = None,
    environment: Optional[EnvironmentProvider] = None,
) -> OperationResult:
    """Set the language tag cookie.

    The cookie is appended as a 'Set-Cookie' header to ``response`` when
    given, otherwise written to ``environment``.

    Args:
        lang_tag: The language tag to store.
        cookie_key: Cookie name (default: "lang_tag").
        cookie_options: Cookie attributes.
        response: Server response.
        environment: Ambient client state; must implement ``write_cookie``.

    Returns:
        OperationResult with the serialized cookie as data, INVALID_INPUT for
        an empty tag or a rejected key/attribute, or MISSING_CONTEXT when
        there is nowhere to write the cookie.
    """
    if not lang_tag:
        logger.error("empty_lang_tag", operation="set_lang_tag_cookie")
        return OperationResult.invalid_input(
            "The provided language tag cannot be empty.", error_code="EMPTY_LANG_TAG"
        )

    writer = environment if isinstance(environment, CookieWriter) else None
    if response is None and writer is None:
        logger.error("cookie_sink_missing", lang_tag=lang_tag)
        return OperationResult.missing_context(
            "No server response provided and the environment cannot store cookies.",
            error_code="COOKIE_SINK_MISSING",
        )

    try:
        serialized = serialize_lang_tag_cookie(lang_tag, cookie_key, cookie_options)
    except CookieError as e:
        logger.error("invalid_lang_tag_cookie", lang_tag=lang_tag, error=str(e))
        return OperationResult.invalid_input(
            f"Invalid language tag cookie: {e}", error_code="INVALID_COOKIE"
        )

    if response is not None:
        response.headers.append("set-cookie", serialized)
    else:
        writer.write_cookie(serialized)

    logger.debug("lang_tag_cookie_set", cookie=serialized)
    return OperationResult.success(data=serialized)
