"""
Check du respect du glossaire du projet.

Actif seulement si LintOptions.glossary n'est pas vide. Un terme source
présent dans la ligne sans sa traduction imposée signale une issue LOW,
non auto-corrigeable.
"""

from .base import Issue, IssueType, Line, ScanContext


def check_glossary(line: Line, context: ScanContext) -> list[Issue]:
    """
    Une issue glossary_mismatch pour le premier terme mal traduit.

    Example:
        >>> context = ScanContext("por", LintOptions(glossary={"Nakama": "Companheiro"}))
        >>> check_glossary(Line(1, "Você é meu nakama"), context)
        [Issue(line_id=1, issue_type=<IssueType.GLOSSARY_MISMATCH: ...>, ...)]
    """
    glossary = context.options.glossary
    if not glossary:
        return []

    lowered = line.text.casefold()
    for source_term, expected in glossary.items():
        if not source_term or source_term.casefold() not in lowered:
            continue
        if expected.casefold() in lowered:
            continue
        return [
            Issue.create(
                line.line_id,
                IssueType.GLOSSARY_MISMATCH,
                line.text,
                suggestion=f"'{source_term}' doit être traduit par '{expected}'",
            )
        ]
    return []
