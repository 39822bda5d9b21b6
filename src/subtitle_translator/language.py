from enum import Enum


class Language(Enum):
    """Langues courantes des pistes de sous-titres (code ISO 639-2/B)."""

    ENGLISH = "eng"
    FRENCH = "fre"
    GERMAN = "ger"
    SPANISH = "spa"
    ITALIAN = "ita"
    PORTUGUESE = "por"
    RUSSIAN = "rus"
    JAPANESE = "jpn"
    KOREAN = "kor"
    CHINESE = "chi"


# Alias reconnus pour chaque langue (ISO 639-1, 639-2/B, 639-2/T, noms)
_ALIASES: dict[Language, frozenset[str]] = {
    Language.ENGLISH: frozenset({"en", "eng", "english", "anglais"}),
    Language.FRENCH: frozenset({"fr", "fre", "fra", "french", "français", "francais"}),
    Language.GERMAN: frozenset({"de", "ger", "deu", "german", "allemand"}),
    Language.SPANISH: frozenset({"es", "spa", "spanish", "espagnol"}),
    Language.ITALIAN: frozenset({"it", "ita", "italian", "italien"}),
    Language.PORTUGUESE: frozenset({"pt", "por", "portuguese", "portugais"}),
    Language.RUSSIAN: frozenset({"ru", "rus", "russian", "russe"}),
    Language.JAPANESE: frozenset({"ja", "jpn", "japanese", "japonais"}),
    Language.KOREAN: frozenset({"ko", "kor", "korean", "coréen"}),
    Language.CHINESE: frozenset({"zh", "chi", "zho", "chinese", "chinois"}),
}


def normalize_code(code: str | None) -> str:
    """
    Normalise un code langue : minuscules, sans suffixe régional.

    Example:
        >>> normalize_code(" pt-BR ")
        'pt'
        >>> normalize_code("en_US")
        'en'
    """
    if not code:
        return ""
    return code.strip().lower().replace("_", "-").split("-", 1)[0]


def resolve_language(code: str | None) -> Language | None:
    """Retourne la Language désignée par un code, None si inconnu."""
    normalized = normalize_code(code)
    if not normalized:
        return None
    for language, aliases in _ALIASES.items():
        if normalized in aliases:
            return language
    return None


def denotes_language(code: str | None, reference: str) -> bool:
    """
    Indique si `code` désigne la même langue que `reference`.

    Un code vide ou inconnu ne désigne jamais la référence.

    Example:
        >>> denotes_language("eng", "en")
        True
        >>> denotes_language("por", "en")
        False
        >>> denotes_language("", "en")
        False
    """
    normalized = normalize_code(code)
    if not normalized:
        return False
    language = resolve_language(normalized)
    if language is None:
        return normalized == normalize_code(reference)
    return language is resolve_language(reference)
