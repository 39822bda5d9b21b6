r"""
Check des balises d'override ASS/SSA.

Une balise d'override s'ouvre par `{\` et se ferme par `}` (ex: `{\an8}`).
Une balise non refermée casse le rendu de toute la ligne : sévérité HIGH.
"""

from typing import Sequence

from .base import Issue, IssueType, Line, ScanContext

TAG_OPENER = "{\\"
TAG_CLOSER = "}"


def find_unterminated_tags(text: str) -> list[int]:
    """
    Retourne la position de chaque ouverture `{\\` sans `}` correspondant.

    Le texte est parcouru de gauche à droite ; une ouverture non fermée
    consomme le reste de la ligne, donc au plus une position est retournée.

    Example:
        >>> find_unterminated_tags("{\\an8}Texte")
        []
        >>> find_unterminated_tags("Texte {\\i1 sans fin")
        [6]
    """
    positions = []
    index = text.find(TAG_OPENER)
    while index != -1:
        closer = text.find(TAG_CLOSER, index + len(TAG_OPENER))
        if closer == -1:
            positions.append(index)
            break
        index = text.find(TAG_OPENER, closer + 1)
    return positions


def check_tags(line: Line, context: ScanContext) -> list[Issue]:
    """Une issue broken_tag par balise non refermée."""
    return [
        Issue.create(
            line.line_id,
            IssueType.BROKEN_TAG,
            line.text[position:],
            suggestion="Ajouter '}' pour fermer la balise",
        )
        for position in find_unterminated_tags(line.text)
    ]


def fix_tags(text: str, issues: Sequence[Issue]) -> str:
    """
    Ferme chaque balise non refermée par un `}`.

    Le fragment non fermé s'étend jusqu'à la fin de la ligne : l'accolade
    est donc ajoutée en fin de texte.
    Les positions sont relues dans le texte courant : les issues reçues ne
    servent qu'à déclencher la correction.

    Example:
        >>> fix_tags("{\\an8Texte", [])
        '{\\\\an8Texte}'
    """
    for _ in find_unterminated_tags(text):
        text += TAG_CLOSER
    return text
