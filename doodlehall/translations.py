"""Translated page strings and locale negotiation."""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

DEFAULT_LOCALE = "en-us"


class Translation(Mapping[str, str]):
    """Read-only message bundle. Unknown keys render as the key itself."""

    def __init__(self, locale: str, messages: Mapping[str, str]):
        self.locale = locale
        self._messages = MappingProxyType(dict(messages))

    def __getitem__(self, key: str) -> str:
        return self._messages.get(key, key)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def get(self, key: str, default: Optional[str] = None) -> str:
        return self._messages.get(key, key if default is None else default)


_MESSAGES = {
    "en-us": {
        "page-title": "Doodlehall",
        "error-page-title": "Something went wrong",
        "back-to-start": "Back to the start page",
        "create-lobby": "Create lobby",
        "lobby-name": "Lobby name",
        "max-players": "Maximum players",
        "public-lobby": "Public lobby",
        "language": "Language",
        "public-lobbies": "Public lobbies",
        "no-public-lobbies": "There are no public lobbies right now.",
        "join-lobby": "Join",
        "players": "Players",
        "lobby-not-found": "This lobby doesn't exist or was closed.",
        "invalid-lobby-settings": "The lobby settings are invalid.",
        "share-lobby": "Share this link to invite other players:",
    },
    "de-de": {
        "page-title": "Doodlehall",
        "error-page-title": "Etwas ist schiefgelaufen",
        "back-to-start": "Zurück zur Startseite",
        "create-lobby": "Lobby erstellen",
        "lobby-name": "Name der Lobby",
        "max-players": "Maximale Spieleranzahl",
        "public-lobby": "Öffentliche Lobby",
        "language": "Sprache",
        "public-lobbies": "Öffentliche Lobbys",
        "no-public-lobbies": "Gerade gibt es keine öffentlichen Lobbys.",
        "join-lobby": "Beitreten",
        "players": "Spieler",
        "lobby-not-found": "Diese Lobby existiert nicht oder wurde geschlossen.",
        "invalid-lobby-settings": "Die Einstellungen der Lobby sind ungültig.",
        "share-lobby": "Teile diesen Link, um andere Spieler einzuladen:",
    },
}

TRANSLATIONS = {locale: Translation(locale, messages) for locale, messages in _MESSAGES.items()}
SUPPORTED_LOCALES = tuple(TRANSLATIONS)


def get_translation(locale: str) -> Translation:
    return TRANSLATIONS.get(locale.lower(), TRANSLATIONS[DEFAULT_LOCALE])


def _parse_accept_language(header: str) -> list[str]:
    """Language tags from an Accept-Language header, highest quality first."""
    weighted = []
    for index, item in enumerate(header.split(",")):
        tag, _, params = item.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue
        # Stable: equal qualities keep header order.
        weighted.append((-quality, index, tag))
    return [tag for _, _, tag in sorted(weighted)]


def negotiate_locale(accept_language: Optional[str]) -> str:
    """Pick the best supported locale for an Accept-Language header."""
    if not accept_language:
        return DEFAULT_LOCALE

    for tag in _parse_accept_language(accept_language):
        if tag in TRANSLATIONS:
            return tag
        primary = tag.split("-")[0]
        for locale in SUPPORTED_LOCALES:
            if locale.split("-")[0] == primary:
                return locale

    return DEFAULT_LOCALE
