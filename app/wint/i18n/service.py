"""Language tag service for dependency injection.

Binds the app language tag configuration, and optionally a server request
and response, so call sites only pass per-call values.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from starlette.requests import HTTPConnection
from starlette.responses import Response

from wint.configuration import Settings
from wint.i18n.cookies import get_lang_tag_cookie, set_lang_tag_cookie
from wint.i18n.environment import EnvironmentProvider
from wint.i18n.hreflang import hreflang, hreflang_paths
from wint.i18n.models import CookieOptions, UrlMode
from wint.i18n.resolvers import get_lang_tag
from wint.i18n.urls import get_path_href
from wint.operations import OperationResult


class LangTagService:
    """Class-based language tag service.

    A thin facade over the module functions: each method fills in the
    configured options, and keyword arguments passed to a method override
    them for that call.

    Usage:
        # Via dependency injection
        from wint.services import LangTagServiceDep

        @router.get("/")
        def home(lang_tags: LangTagServiceDep):
            lang_tag = lang_tags.get_lang_tag().data
            href = lang_tags.get_path_href("/blog", lang_tag).data
            return {"lang_tag": lang_tag, "href": href}

        # Direct instantiation
        service = LangTagService(["en", "es"], url_mode="subdomain")
        service.get_lang_tag(host="es.example.com").data  # "es"
    """

    def __init__(
        self,
        lang_tags: Iterable[str],
        *,
        url_mode: Optional[str] = None,
        search_param_key: Optional[str] = None,
        lang_tag_hosts: Optional[Mapping[str, str]] = None,
        hreflangs: Optional[Mapping[str, str]] = None,
        protocol: Optional[str] = None,
        domain: Optional[str] = None,
        use_cookie: bool = False,
        cookie_key: Optional[str] = None,
        cookie_options: Optional[CookieOptions] = None,
        use_client_preferred_lang_tags: bool = False,
        request: Optional[HTTPConnection] = None,
        response: Optional[Response] = None,
        environment: Optional[EnvironmentProvider] = None,
    ):
        """Initialize the language tag service.

        Args:
            lang_tags: App language tags; the first is the default.
            url_mode: URL structure mode (default: prefix).
            search_param_key: Query key used in search-param mode.
            lang_tag_hosts: Host of each language tag. Only used in host mode.
            hreflangs: hreflang values to use in place of some tags.
            protocol: Protocol used when building hrefs.
            domain: Domain used when building hrefs in subdomain mode.
            use_cookie: Resolve the language tag from the cookie.
            cookie_key: Language tag cookie name.
            cookie_options: Attributes of the language tag cookie.
            use_client_preferred_lang_tags: Resolve from client preferences.
            request: Server request of the current call.
            response: Server response of the current call.
            environment: Ambient client state.
        """
        self.lang_tags = list(lang_tags)
        self.url_mode = UrlMode.from_value(url_mode)
        self.search_param_key = search_param_key
        self.lang_tag_hosts = (
            dict(lang_tag_hosts or {}) if self.url_mode is UrlMode.HOST else {}
        )
        self.hreflangs = dict(hreflangs or {})
        self.protocol = protocol
        self.domain = domain
        self.use_cookie = use_cookie
        self.cookie_key = cookie_key
        self.cookie_options = cookie_options
        self.use_client_preferred_lang_tags = use_client_preferred_lang_tags
        self.request = request
        self.response = response
        self.environment = environment

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        request: Optional[HTTPConnection] = None,
        response: Optional[Response] = None,
        environment: Optional[EnvironmentProvider] = None,
    ) -> "LangTagService":
        """Create a service from the application settings."""
        cookie = settings.cookie
        return cls(
            settings.lang_tags.tags,
            url_mode=settings.url.mode,
            search_param_key=settings.url.search_param_key,
            lang_tag_hosts=settings.lang_tags.hosts,
            hreflangs=settings.lang_tags.hreflangs,
            protocol=settings.url.protocol,
            domain=settings.url.domain,
            use_cookie=cookie.enabled,
            cookie_key=cookie.key,
            cookie_options=CookieOptions(
                max_age=cookie.max_age,
                path=cookie.path,
                domain=cookie.domain,
                secure=cookie.secure,
                http_only=cookie.http_only,
                same_site=cookie.same_site,
            ),
            use_client_preferred_lang_tags=settings.lang_tags.use_client_preferred_lang_tags,
            request=request,
            response=response,
            environment=environment,
        )

    def _context(self) -> Dict[str, Any]:
        return {"request": self.request, "environment": self.environment}

    def get_lang_tag(self, **overrides: Any) -> OperationResult:
        """Select the language tag of the current request.

        See ``wint.i18n.resolvers.get_lang_tag`` for the accepted options.
        """
        options = {
            "url_mode": self.url_mode,
            "search_param_key": self.search_param_key,
            "lang_tag_hosts": self.lang_tag_hosts,
            "use_cookie": self.use_cookie,
            "cookie_key": self.cookie_key,
            "use_client_preferred_lang_tags": self.use_client_preferred_lang_tags,
            **self._context(),
            **overrides,
        }
        lang_tags = options.pop("lang_tags", self.lang_tags)
        return get_lang_tag(lang_tags, **options)

    def get_path_href(self, path: str, lang_tag: str, **overrides: Any) -> OperationResult:
        """Build the href of ``path`` for ``lang_tag``.

        See ``wint.i18n.urls.get_path_href`` for the accepted options.
        """
        options = {
            "url_mode": self.url_mode,
            "protocol": self.protocol,
            "domain": self.domain,
            "lang_tag_host": self.lang_tag_hosts.get(lang_tag),
            "search_param_key": self.search_param_key,
            **self._context(),
            **overrides,
        }
        return get_path_href(path, lang_tag, **options)

    def hreflang(
        self, hrefs: Mapping[str, str], x_default_lang_tag: Optional[str] = None, **overrides: Any
    ) -> OperationResult:
        """Build hreflang links from hrefs.

        The x-default tag defaults to the app default language tag.
        """
        options = {"hreflangs": self.hreflangs, **overrides}
        return hreflang(hrefs, self._x_default(x_default_lang_tag), **options)

    def hreflang_paths(
        self, paths: Mapping[str, str], x_default_lang_tag: Optional[str] = None, **overrides: Any
    ) -> OperationResult:
        """Build hreflang links from paths.

        The x-default tag defaults to the app default language tag.
        """
        options = {
            "hreflangs": self.hreflangs,
            "url_mode": self.url_mode,
            "protocol": self.protocol,
            "domain": self.domain,
            "lang_tag_hosts": self.lang_tag_hosts,
            "search_param_key": self.search_param_key,
            **self._context(),
            **overrides,
        }
        return hreflang_paths(paths, self._x_default(x_default_lang_tag), **options)

    def get_lang_tag_cookie(self, **overrides: Any) -> OperationResult:
        """Get the value of the language tag cookie."""
        options = {"cookie_key": self.cookie_key, **self._context(), **overrides}
        return get_lang_tag_cookie(**options)

    def set_lang_tag_cookie(self, lang_tag: str, **overrides: Any) -> OperationResult:
        """Set the language tag cookie on the response, or in the environment."""
        options = {
            "cookie_key": self.cookie_key,
            "cookie_options": self.cookie_options,
            "response": self.response,
            "environment": self.environment,
            **overrides,
        }
        return set_lang_tag_cookie(lang_tag, **options)

    def _x_default(self, x_default_lang_tag: Optional[str]) -> str:
        if x_default_lang_tag is not None:
            return x_default_lang_tag
        return self.lang_tags[0] if self.lang_tags else ""
