"""
Détecteur de mots restés en langue de référence (non traduits).

Heuristique lexicale simple : la ligne est découpée en mots et chaque mot
est comparé, sans tenir compte de la casse, au vocabulaire de référence.
Une ligne a le problème ou ne l'a pas : une seule issue par ligne.

Jamais auto-corrigeable : corriger demande de retraduire.
"""

import re

from ..language import denotes_language
from .base import Issue, IssueType, LintOptions, Line, ScanContext

# Mot = série maximale de lettres Unicode
WORD_PATTERN = re.compile(r"[^\W\d_]+")


def tokenize(text: str) -> list[str]:
    """
    Découpe sur les espaces et la ponctuation, en minuscules.

    Example:
        >>> tokenize("Olá mundo, hello-friend!")
        ['olá', 'mundo', 'hello', 'friend']
    """
    return [word.casefold() for word in WORD_PATTERN.findall(text)]


def is_residual_check_active(target_language: str, options: LintOptions) -> bool:
    """
    Le check est inactif quand la cible est la langue de référence, ou quand
    la source connue n'est pas la langue de référence.

    Un code cible vide ou inconnu laisse le check actif.
    """
    if denotes_language(target_language, options.reference_language):
        return False
    if options.source_language and not denotes_language(
        options.source_language, options.reference_language
    ):
        return False
    return True


def find_residual_words(text: str, reference_words: frozenset[str]) -> list[str]:
    """Mots de la ligne présents dans le vocabulaire, dans l'ordre du texte."""
    return [word for word in tokenize(text) if word in reference_words]


def check_residual_language(line: Line, context: ScanContext) -> list[Issue]:
    """
    Une issue residual_language si au moins un mot de référence subsiste.

    Example:
        >>> context = ScanContext("por", LintOptions())
        >>> check_residual_language(Line(5, "Olá mundo, hello friend"), context)
        [Issue(line_id=5, issue_type=<IssueType.RESIDUAL_LANGUAGE: ...>, ...)]
    """
    options = context.options
    if not is_residual_check_active(context.target_language, options):
        return []

    matches = find_residual_words(line.text, options.reference_words)
    if not matches:
        return []

    return [
        Issue.create(
            line.line_id,
            IssueType.RESIDUAL_LANGUAGE,
            line.text,
            suggestion=f"Mot non traduit détecté : '{matches[0]}'",
        )
    ]
