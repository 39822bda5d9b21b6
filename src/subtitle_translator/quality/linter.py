"""
Linter des sous-titres traduits : scan et réparation automatique.

Les deux fonctions publiques sont pures (aucune I/O, aucun état partagé) :

- scan() : exécute les checkers dans un ordre fixe sur chaque ligne
- repair() : applique les fixers aux lignes porteuses d'issues corrigeables

Les checkers et fixers sont des fonctions nommées rangées dans des tables
ordonnées ; ajouter une règle revient à ajouter une entrée sans toucher
à l'agrégation.

Example:
    >>> result = scan(lines, "por")
    >>> if not result.passed_all:
    ...     fixed = repair(lines, result.issues)
    ...     remaining = scan(fixed, "por")
"""

from typing import Iterable, Mapping, Sequence

from .base import (
    Checker,
    Fixer,
    Issue,
    IssueType,
    Line,
    LintOptions,
    Result,
    ScanContext,
)
from .bracket_check import check_brackets, fix_brackets
from .glossary_check import check_glossary
from .punctuation_check import check_punctuation, fix_punctuation
from .residual_check import check_residual_language
from .tag_check import check_tags, fix_tags

# Ordre de détection : définit l'ordre des issues d'une même ligne
CHECKERS: Mapping[IssueType, Checker] = {
    IssueType.BROKEN_TAG: check_tags,
    IssueType.BRACKET_MISMATCH: check_brackets,
    IssueType.EXCESSIVE_PUNCTUATION: check_punctuation,
    IssueType.RESIDUAL_LANGUAGE: check_residual_language,
    IssueType.GLOSSARY_MISMATCH: check_glossary,
}

# Ordre d'application des corrections sur une ligne
FIXERS: Mapping[IssueType, Fixer] = {
    IssueType.BROKEN_TAG: fix_tags,
    IssueType.BRACKET_MISMATCH: fix_brackets,
    IssueType.EXCESSIVE_PUNCTUATION: fix_punctuation,
}


def scan(
    lines: Iterable[str | Line],
    target_language: str,
    options: LintOptions | None = None,
) -> Result:
    """
    Analyse les lignes traduites et retourne toutes les issues.

    Args:
        lines: Textes des lignes (ou Line), dans l'ordre du fichier
        target_language: Code langue cible (vide ou inconnu accepté)
        options: Configuration (None = tables par défaut)

    Returns:
        Result avec issues triées par ligne puis par ordre de détection

    Example:
        >>> scan(["Olá, mundo!"], "por").passed_all
        True
        >>> scan([], "por").passed_all
        True
    """
    context = ScanContext(target_language or "", options or LintOptions())
    issues: list[Issue] = []
    for line in Line.from_texts(lines):
        for checker in CHECKERS.values():
            issues.extend(checker(line, context))
    return Result(issues=tuple(issues))


def repair(lines: Sequence[str | Line], issues: Iterable[Issue]) -> list[str]:
    """
    Produit une nouvelle liste de lignes avec les défauts corrigeables réparés.

    Seules les lignes portant une issue auto-corrigeable sont réécrites,
    par les fixers de leurs types d'issues, dans l'ordre de FIXERS. Chaque
    fixer reçoit les issues de son type : aucune configuration n'est relue,
    la correction porte sur ce que le scan a relevé.
    Les issues residual_language sont ignorées ; les line_id hors limites
    aussi.

    Args:
        lines: Lignes originales (non modifiées)
        issues: Issues issues d'un scan de ces lignes

    Returns:
        Nouvelle liste de textes, même longueur que `lines`

    Example:
        >>> repair(["Quoi???!!!"], scan(["Quoi???!!!"], "por").issues)
        ['Quoi?']
    """
    texts = [line.text for line in Line.from_texts(lines)]

    fixable: dict[int, dict[IssueType, list[Issue]]] = {}
    for issue in issues:
        if not issue.auto_fixable or not 1 <= issue.line_id <= len(texts):
            continue
        by_type = fixable.setdefault(issue.line_id, {})
        by_type.setdefault(issue.issue_type, []).append(issue)

    for line_id, by_type in fixable.items():
        text = texts[line_id - 1]
        for issue_type, fixer in FIXERS.items():
            if issue_type in by_type:
                text = fixer(text, by_type[issue_type])
        texts[line_id - 1] = text

    return texts
