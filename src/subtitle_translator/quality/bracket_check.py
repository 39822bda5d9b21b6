"""
Check de l'équilibre des parenthèses et crochets.

Les traductions automatiques perdent souvent la fermeture des annotations
de sous-titres ([Musique], (rires)...). Les accolades ne sont pas concernées :
elles appartiennent aux balises d'override (voir tag_check).
"""

from dataclasses import dataclass
from typing import Sequence

from .base import Issue, IssueType, Line, ScanContext

OPENERS = {"(": ")", "[": "]"}
CLOSERS = {")": "(", "]": "["}

# Nombre de caractères affichés de part et d'autre d'une fermeture orpheline
CONTEXT_WINDOW = 10


@dataclass
class BracketScan:
    """
    État final d'un parcours de ligne.

    Attributes:
        stray_closers: Positions des fermetures sans ouverture correspondante
        unclosed: Positions des ouvertures restées sur la pile (ordre du texte)
    """

    stray_closers: list[int]
    unclosed: list[int]


def scan_brackets(text: str) -> BracketScan:
    """
    Parcourt la ligne avec une pile partagée par les deux familles.

    Une fermeture dont le sommet de pile n'est pas l'ouverture correspondante
    (ou pile vide) est orpheline : elle ne modifie pas la pile.

    Example:
        >>> scan_brackets("[Musique] (rires")
        BracketScan(stray_closers=[], unclosed=[10])
        >>> scan_brackets("fin)")
        BracketScan(stray_closers=[3], unclosed=[])
    """
    stack: list[int] = []
    stray: list[int] = []
    for index, char in enumerate(text):
        if char in OPENERS:
            stack.append(index)
        elif char in CLOSERS:
            if stack and text[stack[-1]] == CLOSERS[char]:
                stack.pop()
            else:
                stray.append(index)
    return BracketScan(stray_closers=stray, unclosed=stack)


def _group_adjacent_openers(text: str, positions: list[int]) -> list[int]:
    """Réduit une série d'ouvertures identiques adjacentes (`((`) à sa première."""
    groups: list[int] = []
    previous = -2
    for position in positions:
        if groups and position == previous + 1 and text[position] == text[previous]:
            previous = position
            continue
        groups.append(position)
        previous = position
    return groups


def check_brackets(line: Line, context: ScanContext) -> list[Issue]:
    """
    Signale les fermetures orphelines puis les ouvertures non fermées.

    Une ouverture doublée (`((`) compte pour une seule issue.
    """
    text = line.text
    result = scan_brackets(text)

    # Fermetures orphelines et ouvertures restantes, dans l'ordre du texte
    findings: list[tuple[int, str, str]] = []
    for position in result.stray_closers:
        start = max(0, position - CONTEXT_WINDOW)
        findings.append(
            (
                position,
                text[start : position + CONTEXT_WINDOW + 1],
                f"Fermeture '{text[position]}' sans ouverture correspondante",
            )
        )
    for position in _group_adjacent_openers(text, result.unclosed):
        findings.append(
            (
                position,
                text[position:],
                f"Ouverture '{text[position]}' jamais fermée, ajouter '{OPENERS[text[position]]}'",
            )
        )

    return [
        Issue.create(line.line_id, IssueType.BRACKET_MISMATCH, content, suggestion)
        for _, content, suggestion in sorted(findings, key=lambda item: item[0])
    ]


def fix_brackets(text: str, issues: Sequence[Issue]) -> str:
    """
    Supprime les fermetures orphelines et ferme les ouvertures restantes.

    Les fermetures ajoutées suivent l'ordre inverse de la pile.
    La pile est recalculée sur le texte courant.

    Example:
        >>> fix_brackets("[Musique (douce", [])
        '[Musique (douce)]'
        >>> fix_brackets("Bonjour)", [])
        'Bonjour'
    """
    result = scan_brackets(text)
    stray = set(result.stray_closers)
    kept = "".join(char for index, char in enumerate(text) if index not in stray)
    closing = "".join(OPENERS[text[position]] for position in reversed(result.unclosed))
    return kept + closing
