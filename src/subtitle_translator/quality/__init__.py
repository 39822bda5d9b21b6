"""
Quality Gate : linter des sous-titres traduits.

Ce module détecte les défauts introduits par la traduction automatique ou
par une corruption d'encodage, les classe par type et sévérité, et répare
automatiquement ceux qui peuvent l'être sans jugement humain.

Checks (ordre de détection) :
- broken_tag (HIGH, corrigeable) : balise `{\\...` non refermée
- bracket_mismatch (MEDIUM, corrigeable) : parenthèses/crochets déséquilibrés
- excessive_punctuation (LOW, corrigeable) : "???!!!", "........"
- residual_language (MEDIUM) : mots anglais restés dans la traduction
- glossary_mismatch (LOW) : terme du glossaire mal traduit

Example:
    >>> from subtitle_translator.quality import scan, repair
    >>> result = scan(["Olá mundo, hello friend"], "por")
    >>> result.passed_all
    False
"""

from .base import (
    AUTO_FIXABLE_BY_TYPE,
    SEVERITY_BY_TYPE,
    Checker,
    Fixer,
    Issue,
    IssueType,
    Line,
    LintOptions,
    Result,
    ScanContext,
    Severity,
)
from .linter import CHECKERS, FIXERS, repair, scan
from .wordlists import (
    DEFAULT_PUNCTUATION_THRESHOLD,
    DEFAULT_REFERENCE_LANGUAGE,
    DEFAULT_REFERENCE_WORDS,
)

__all__ = [
    "scan",
    "repair",
    "CHECKERS",
    "FIXERS",
    # Modèle
    "Issue",
    "IssueType",
    "Line",
    "LintOptions",
    "Result",
    "ScanContext",
    "Severity",
    "SEVERITY_BY_TYPE",
    "AUTO_FIXABLE_BY_TYPE",
    # Protocols
    "Checker",
    "Fixer",
    # Tables par défaut
    "DEFAULT_PUNCTUATION_THRESHOLD",
    "DEFAULT_REFERENCE_LANGUAGE",
    "DEFAULT_REFERENCE_WORDS",
]
