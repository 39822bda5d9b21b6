"""
Check des séries de ponctuation terminale.

Les modèles de traduction amplifient volontiers la ponctuation expressive
("Quoi???!!!", "Attends........"). Défaut cosmétique : sévérité LOW.
"""

import re
from typing import Iterator, Sequence

from .base import Issue, IssueType, LintOptions, Line, ScanContext
from .wordlists import DEFAULT_PUNCTUATION_THRESHOLD

TERMINAL_RUN = re.compile(r"[.!?]+")
ELLIPSIS = "..."

# Caractères de contexte affichés autour d'une série
CONTEXT_WINDOW = 10


def find_excessive_runs(text: str, threshold: int) -> Iterator[re.Match[str]]:
    """
    Itère sur les séries de `.`, `!`, `?` d'au moins `threshold` caractères.

    Les types mélangés comptent ensemble ; l'ellipse canonique `...` n'est
    jamais signalée.

    Example:
        >>> [m.group() for m in find_excessive_runs("Quoi???!!! Bon...", 3)]
        ['???!!!']
    """
    for match in TERMINAL_RUN.finditer(text):
        if _is_excessive(match.group(), threshold):
            yield match


def _is_excessive(run: str, threshold: int) -> bool:
    return len(run) >= threshold and run != ELLIPSIS


def check_punctuation(line: Line, context: ScanContext) -> list[Issue]:
    """Une issue par série excessive, avec son contexte immédiat."""
    issues = []
    for match in find_excessive_runs(line.text, context.options.punctuation_threshold):
        start = max(0, match.start() - CONTEXT_WINDOW)
        issues.append(
            Issue.create(
                line.line_id,
                IssueType.EXCESSIVE_PUNCTUATION,
                line.text[start : match.end() + CONTEXT_WINDOW],
                suggestion=f"Réduire '{match.group()}' à '{collapse_run(match.group())}'",
                fragment=match.group(),
            )
        )
    return issues


def collapse_run(run: str) -> str:
    """
    Forme courte d'une série : `...` si uniquement des points, sinon le
    premier caractère.

    Example:
        >>> collapse_run("........")
        '...'
        >>> collapse_run("???!!!")
        '?'
    """
    if set(run) == {"."}:
        return ELLIPSIS
    return run[0]


def fix_punctuation(text: str, issues: Sequence[Issue]) -> str:
    """
    Réduit à leur forme courte les séries signalées par le scan.

    Une série est réduite si elle contient le fragment d'une issue : la
    suppression d'une fermeture orpheline peut avoir fusionné deux séries.
    Le seuil n'est pas relu : seules les séries relevées au scan comptent.
    Une issue sans fragment (construite à la main) retombe sur le seuil
    par défaut.

    Example:
        >>> line = Line(1, "Oi!!")
        >>> issues = check_punctuation(line, ScanContext("por", LintOptions(punctuation_threshold=2)))
        >>> fix_punctuation("Oi!!", issues)
        'Oi!'
    """
    fragments = {issue.fragment for issue in issues if issue.fragment}
    use_default = any(not issue.fragment for issue in issues)

    def _replace(match: re.Match[str]) -> str:
        run = match.group()
        if any(fragment in run for fragment in fragments):
            return collapse_run(run)
        if use_default and _is_excessive(run, DEFAULT_PUNCTUATION_THRESHOLD):
            return collapse_run(run)
        return run

    return TERMINAL_RUN.sub(_replace, text)
