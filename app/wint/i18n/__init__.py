"""i18n system - language tag resolution for web requests.

Decides which language tag of the app serves the current request, and
expresses a language tag in URLs and cookies.

Main components:
- models: LangTags, UrlMode, CookieOptions, HreflangLink
- environment: EnvironmentProvider, StaticEnvironment and source precedence
- cookies: get_lang_tag_cookie / set_lang_tag_cookie
- urls: get_path_href
- negotiation: Accept-Language negotiation
- resolvers: get_lang_tag
- hreflang: hreflang / hreflang_paths
- service: LangTagService facade, factory: create_lang_tag_service
"""

from wint.i18n.models import (
    CookieOptions,
    HreflangLink,
    LangTags,
    UrlMode,
)
from wint.i18n.environment import (
    CookieWriter,
    EnvironmentProvider,
    StaticEnvironment,
)
from wint.i18n.cookies import (
    get_lang_tag_cookie,
    serialize_lang_tag_cookie,
    set_lang_tag_cookie,
)
from wint.i18n.urls import get_path_href
from wint.i18n.negotiation import negotiate_lang_tag, synthesize_preferences
from wint.i18n.resolvers import get_lang_tag
from wint.i18n.hreflang import hreflang, hreflang_paths
from wint.i18n.service import LangTagService
from wint.i18n.factory import create_lang_tag_service

__all__ = [
    "CookieOptions",
    "HreflangLink",
    "LangTags",
    "UrlMode",
    "CookieWriter",
    "EnvironmentProvider",
    "StaticEnvironment",
    "get_lang_tag_cookie",
    "serialize_lang_tag_cookie",
    "set_lang_tag_cookie",
    "get_path_href",
    "negotiate_lang_tag",
    "synthesize_preferences",
    "get_lang_tag",
    "hreflang",
    "hreflang_paths",
    "LangTagService",
    "create_lang_tag_service",
]
