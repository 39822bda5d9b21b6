"""
Traduction de pistes de sous-titres : Quality Gate.

subtitle-translator extrait les pistes de sous-titres d'un conteneur vidéo,
les fait traduire par une API de traduction automatique puis les remuxe.
Ce package contient la partie autonome de l'outil : le Quality Gate, qui
inspecte les lignes traduites et répare les défauts mécaniques.

Organisation du package :
- quality/ : linter pur (checkers, fixers, scan, repair)
- gate.py : orchestration scan → auto-fix → re-scan avec logs
- report.py : rapports texte via templates Jinja2
- language.py : codes langue (ISO 639-1/639-2)
- logger.py : logs console (tqdm) et fichier par session
- config.py : configuration verrouillable (niveaux de log, templates)

Exports publics :
    Fonctions :
        - scan : analyse des lignes → Result
        - repair : correction des issues auto-corrigeables

    Classes :
        - QualityGate : orchestration avec vérification après correction
        - ReportRenderer : rendu des rapports

    Modèle :
        - Issue, IssueType, Severity, Result, Line, LintOptions

Usage minimal :
    >>> from subtitle_translator import QualityGate
    >>>
    >>> gate = QualityGate()
    >>> result = gate.inspect(translated_lines, "por")
    >>> if not result.passed_all:
    ...     outcome = gate.auto_fix(translated_lines, "por", result)
    ...     translated_lines = list(outcome.repaired)
"""

from .gate import QualityGate, RepairOutcome
from .language import Language, denotes_language
from .quality import (
    Issue,
    IssueType,
    Line,
    LintOptions,
    Result,
    Severity,
    repair,
    scan,
)
from .report import ReportRenderer

__all__ = [
    "scan",
    "repair",
    "QualityGate",
    "RepairOutcome",
    "ReportRenderer",
    "Issue",
    "IssueType",
    "Line",
    "LintOptions",
    "Result",
    "Severity",
    "Language",
    "denotes_language",
]

__version__ = "0.1.0"
