"""Request context sources for language tag operations.

Each request-derived value (URL, host, cookies, preferences) can come from
three places, in precedence order:

1. An explicit argument passed by the caller
2. The server request (a Starlette/FastAPI ``Request``)
3. An ``EnvironmentProvider`` describing the ambient client state

``first_present`` applies that rule; the ``request_*`` and ``environment_*``
helpers read one field from one source.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from starlette.datastructures import URL
from starlette.requests import HTTPConnection, cookie_parser

T = TypeVar("T")


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Read access to the ambient client state.

    Implementations stand in for the page location, cookie jar and
    language preferences of the client the code runs for.
    """

    def current_url(self) -> Optional[str]:
        """Absolute URL of the current page (scheme, host, path and query)."""
        ...

    def current_cookies(self) -> Optional[str]:
        """Cookies visible to the current page, in 'Cookie' header syntax."""
        ...

    def current_preferences(self) -> Sequence[str]:
        """Preferred language tags, most preferred first."""
        ...


@runtime_checkable
class CookieWriter(Protocol):
    """An environment that can store a cookie."""

    def write_cookie(self, set_cookie: str) -> None:
        """Store a cookie given in 'Set-Cookie' header syntax."""
        ...


@dataclass
class StaticEnvironment:
    """In-memory EnvironmentProvider.

    Useful for tests, scripts, and rendering pages outside of a request.
    ``write_cookie`` keeps the cookie jar in 'Cookie' header syntax, with a
    new value replacing any existing cookie of the same name.

    Attributes:
        url: Absolute URL of the current page.
        cookies: Cookie string, e.g. "lang_tag=en; theme=dark".
        languages: Preferred language tags, most preferred first.
    """

    url: Optional[str] = None
    cookies: str = ""
    languages: List[str] = field(default_factory=list)

    def current_url(self) -> Optional[str]:
        return self.url

    def current_cookies(self) -> Optional[str]:
        return self.cookies or None

    def current_preferences(self) -> Sequence[str]:
        return list(self.languages)

    def write_cookie(self, set_cookie: str) -> None:
        pair = set_cookie.split(";", 1)[0].strip()
        name = pair.partition("=")[0].strip()
        jar = cookie_parser(self.cookies)
        jar.pop(name, None)
        entries = [f"{k}={v}" for k, v in jar.items()]
        entries.append(pair)
        self.cookies = "; ".join(entries)


def first_present(*values: Optional[T]) -> Optional[T]:
    """Return the first value that is not None or empty.

    Args:
        *values: Candidate values in precedence order, typically the explicit
            argument, the request field and the environment field.

    Returns:
        The first truthy value, or None.
    """
    return next((v for v in values if v), None)


def request_header(request: Optional[HTTPConnection], name: str) -> Optional[str]:
    """Read a header from the server request, if any."""
    if request is None:
        return None
    return request.headers.get(name)


def request_url(request: Optional[HTTPConnection]) -> Optional[str]:
    """Path and query string of the server request, if any."""
    if request is None:
        return None
    url = request.url
    return f"{url.path}?{url.query}" if url.query else url.path


def _environment_url(environment: Optional[EnvironmentProvider]) -> Optional[URL]:
    if environment is None:
        return None
    current = environment.current_url()
    return URL(current) if current else None


def environment_path(environment: Optional[EnvironmentProvider]) -> Optional[str]:
    """Path of the environment's current URL."""
    url = _environment_url(environment)
    return url.path if url else None


def environment_query(environment: Optional[EnvironmentProvider]) -> Optional[str]:
    """Query string of the environment's current URL, with a leading '?'."""
    url = _environment_url(environment)
    return f"?{url.query}" if url and url.query else None


def environment_host(environment: Optional[EnvironmentProvider]) -> Optional[str]:
    """Host (and port, if any) of the environment's current URL."""
    url = _environment_url(environment)
    return url.netloc if url else None


def environment_protocol(environment: Optional[EnvironmentProvider]) -> Optional[str]:
    """Scheme of the environment's current URL."""
    url = _environment_url(environment)
    return url.scheme if url else None


def environment_cookies(environment: Optional[EnvironmentProvider]) -> Optional[str]:
    """Cookie string of the environment."""
    if environment is None:
        return None
    return environment.current_cookies()


def environment_preferences(environment: Optional[EnvironmentProvider]) -> List[str]:
    """Language preferences of the environment."""
    if environment is None:
        return []
    return [lang for lang in environment.current_preferences() if lang]
