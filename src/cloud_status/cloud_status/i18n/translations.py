# ABOUTME: Label catalogs for the connection indicator
# ABOUTME: Resolves namespaced translation keys with English fallback

from typing import Dict, Final

DEFAULT_LOCALE: Final[str] = "en"

CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        "connection:connected": "Connected",
        "connection:connecting": "Connecting to cloud...",
        "connection:reconnecting": "Reconnecting...",
        "connection:disconnected": "Disconnected from cloud",
    },
    "es": {
        "connection:connected": "Conectado",
        "connection:connecting": "Conectando a la nube...",
        "connection:reconnecting": "Reconectando...",
        "connection:disconnected": "Desconectado de la nube",
    },
    "de": {
        "connection:connected": "Verbunden",
        "connection:connecting": "Verbindung zur Cloud wird hergestellt...",
        "connection:reconnecting": "Verbindung wird wiederhergestellt...",
        "connection:disconnected": "Keine Verbindung zur Cloud",
    },
    "zh": {
        "connection:connected": "已连接",
        "connection:connecting": "正在连接云端...",
        "connection:reconnecting": "正在重新连接...",
        "connection:disconnected": "已与云端断开连接",
    },
}


def supported_locales() -> list[str]:
    """Return the locales that have a catalog, default first."""
    return [DEFAULT_LOCALE] + sorted(locale for locale in CATALOGS if locale != DEFAULT_LOCALE)


def language_of(locale: str) -> str:
    """Extract the lowercased language subtag from a tag such as ``"es-MX"`` or ``"ZH_cn"``."""
    return locale.strip().replace("_", "-").split("-", 1)[0].lower()


def normalize_locale(locale: str | None) -> str:
    """
    Reduce a locale tag to a catalog name.

    Region subtags and case are ignored (``"es-MX"`` and ``"ES_mx"`` both
    resolve to ``"es"``). Anything without a catalog resolves to the default.
    """
    if not locale:
        return DEFAULT_LOCALE
    language = language_of(locale)
    return language if language in CATALOGS else DEFAULT_LOCALE


def translate(key: str, locale: str | None = None) -> str:
    """
    Look up a translation key.

    Args:
        key: Namespaced key such as ``"connection:connected"``
        locale: Locale tag; falls back to English when unknown

    Returns:
        The translated label, the English label when the locale lacks the
        key, or the key itself when no catalog knows it.
    """
    catalog = CATALOGS[normalize_locale(locale)]
    if key in catalog:
        return catalog[key]
    return CATALOGS[DEFAULT_LOCALE].get(key, key)
