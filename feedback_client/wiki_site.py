"""Wiki site resolution and canonical page URLs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote

DEFAULT_LANGUAGE_CODE = "en"
BASE_DOMAIN = "wikipedia.org"

# Language codes whose subdomain differs from the code itself.
_SUBDOMAIN_OVERRIDES: Mapping[str, str] = {
    "zh-hans": "zh",
    "zh-hant": "zh",
    "zh-cn": "zh",
    "zh-tw": "zh",
    "zh-hk": "zh",
    "be-x-old": "be-tarask",
    "nb": "no",
}

_SPECIAL_ALIASES: Mapping[str, str] = {
    "de": "Spezial",
    "es": "Especial",
    "fr": "Spécial",
    "it": "Speciale",
    "ja": "特別",
    "nl": "Speciaal",
    "pl": "Specjalna",
    "pt": "Especial",
    "ru": "Служебная",
    "sv": "Special",
    "zh": "Special",
}

_USER_ALIASES: Mapping[str, str] = {
    "de": "Benutzer",
    "es": "Usuario",
    "fr": "Utilisateur",
    "it": "Utente",
    "ja": "利用者",
    "nl": "Gebruiker",
    "pl": "Wikipedysta",
    "pt": "Usuário(a)",
    "ru": "Участник",
    "sv": "Användare",
    "zh": "User",
}


def _normalise_code(language_code: Optional[str]) -> str:
    code = (language_code or "").strip().lower().replace("_", "-")
    return code or DEFAULT_LANGUAGE_CODE


def subdomain_for(language_code: Optional[str]) -> str:
    code = _normalise_code(language_code)
    return _SUBDOMAIN_OVERRIDES.get(code, code)


def special_alias_for(language_code: Optional[str]) -> str:
    return _SPECIAL_ALIASES.get(subdomain_for(language_code), "Special")


def user_alias_for(language_code: Optional[str]) -> str:
    return _USER_ALIASES.get(subdomain_for(language_code), "User")


@dataclass(frozen=True)
class WikiSite:
    language_code: str
    authority: str
    scheme: str = "https"

    @classmethod
    def for_language_code(cls, language_code: Optional[str]) -> "WikiSite":
        code = _normalise_code(language_code)
        return cls(language_code=code, authority=f"{subdomain_for(code)}.{BASE_DOMAIN}")

    def url(self) -> str:
        return f"{self.scheme}://{self.authority}"


@dataclass(frozen=True)
class PageTitle:
    text: str
    site: WikiSite
    fragment: Optional[str] = None

    @property
    def namespace(self) -> str:
        prefix, sep, _ = self.text.partition(":")
        return prefix if sep else ""

    @property
    def prefixed_text(self) -> str:
        return self.text.strip().replace(" ", "_")

    @property
    def uri(self) -> str:
        path = quote(self.prefixed_text, safe="/:()")
        suffix = f"#{quote(self.fragment.replace(' ', '_'))}" if self.fragment else ""
        return f"{self.site.url()}/wiki/{path}{suffix}"


def user_contributions_title(username: str, language_code: Optional[str]) -> PageTitle:
    site = WikiSite.for_language_code(language_code)
    return PageTitle(f"{special_alias_for(language_code)}:Contributions/{username}", site)


def user_profile_title(username: str, language_code: Optional[str]) -> PageTitle:
    site = WikiSite.for_language_code(language_code)
    return PageTitle(f"{user_alias_for(language_code)}:{username}", site)
