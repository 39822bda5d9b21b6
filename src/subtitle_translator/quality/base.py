"""
Types de base du Quality Gate.

Ce module définit les valeurs manipulées par le linter : lignes, issues,
résultat de scan et options. Toutes sont immuables et créées à chaque appel,
ce qui permet d'appeler scan()/repair() depuis plusieurs threads sans
coordination.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping, NamedTuple, Protocol, Sequence

from .wordlists import (
    DEFAULT_PUNCTUATION_THRESHOLD,
    DEFAULT_REFERENCE_LANGUAGE,
    DEFAULT_REFERENCE_WORDS,
)

# Longueur maximale du contenu affiché dans une issue
CONTENT_MAX_LENGTH = 50


class Severity(str, Enum):
    """
    Niveau de gravité d'une issue.

    - HIGH : casse le rendu en aval (balise corrompue)
    - MEDIUM : artefact de traduction demandant un jugement
    - LOW : cosmétique
    """

    HIGH = "HIGH"
    MEDIUM = "MED"
    LOW = "LOW"


class IssueType(str, Enum):
    """Types de défauts détectés. Chaque type a son checker."""

    BROKEN_TAG = "broken_tag"
    BRACKET_MISMATCH = "bracket_mismatch"
    EXCESSIVE_PUNCTUATION = "excessive_punctuation"
    RESIDUAL_LANGUAGE = "residual_language"
    GLOSSARY_MISMATCH = "glossary_mismatch"


SEVERITY_BY_TYPE: Mapping[IssueType, Severity] = {
    IssueType.BROKEN_TAG: Severity.HIGH,
    IssueType.BRACKET_MISMATCH: Severity.MEDIUM,
    IssueType.EXCESSIVE_PUNCTUATION: Severity.LOW,
    IssueType.RESIDUAL_LANGUAGE: Severity.MEDIUM,
    IssueType.GLOSSARY_MISMATCH: Severity.LOW,
}

# residual_language et glossary_mismatch demandent une retraduction
AUTO_FIXABLE_BY_TYPE: Mapping[IssueType, bool] = {
    IssueType.BROKEN_TAG: True,
    IssueType.BRACKET_MISMATCH: True,
    IssueType.EXCESSIVE_PUNCTUATION: True,
    IssueType.RESIDUAL_LANGUAGE: False,
    IssueType.GLOSSARY_MISMATCH: False,
}


def truncate(text: str, max_length: int = CONTENT_MAX_LENGTH) -> str:
    """Tronque un texte pour l'affichage (suffixe "...")."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class Line(NamedTuple):
    """
    Ligne de sous-titre traduite.

    Attributes:
        line_id: Index 1-based de la ligne (stable entre scan et repair)
        text: Texte de la ligne
    """

    line_id: int
    text: str

    @classmethod
    def from_texts(cls, texts: Iterable["str | Line"]) -> tuple["Line", ...]:
        """
        Numérote une séquence de textes à partir de 1.

        Les objets Line déjà construits sont renumérotés selon leur position.

        Example:
            >>> Line.from_texts(["Olá", "Tchau"])
            (Line(line_id=1, text='Olá'), Line(line_id=2, text='Tchau'))
        """
        return tuple(
            cls(index, item.text if isinstance(item, Line) else item)
            for index, item in enumerate(texts, start=1)
        )


@dataclass(frozen=True)
class Issue:
    """
    Défaut détecté sur une ligne.

    La sévérité et l'auto-correction sont dérivées du type : elles ne
    peuvent jamais varier d'une instance à l'autre.

    Attributes:
        line_id: Index 1-based de la ligne fautive
        issue_type: Type du défaut
        content: Extrait lisible (affichage uniquement, jamais comparé)
        suggestion: Indication pour la revue manuelle
        fragment: Texte exact visé par le fixer (non tronqué, non affiché)
    """

    line_id: int
    issue_type: IssueType
    content: str
    suggestion: str = ""
    fragment: str = field(default="", repr=False)

    @classmethod
    def create(
        cls,
        line_id: int,
        issue_type: IssueType,
        content: str,
        suggestion: str = "",
        fragment: str = "",
    ) -> "Issue":
        """Construit une issue avec un contenu tronqué pour l'affichage."""
        return cls(line_id, issue_type, truncate(content), suggestion, fragment)

    @property
    def severity(self) -> Severity:
        return SEVERITY_BY_TYPE[self.issue_type]

    @property
    def auto_fixable(self) -> bool:
        return AUTO_FIXABLE_BY_TYPE[self.issue_type]

    def __str__(self) -> str:
        return (
            f"[{self.severity.value}] ligne {self.line_id} "
            f"{self.issue_type.value}: {self.content}"
        )


@dataclass(frozen=True)
class Result:
    """
    Résultat d'un scan.

    Les issues sont triées par line_id croissant, puis dans l'ordre de
    détection des checkers pour une même ligne.

    Example:
        >>> result = scan(["Olá, mundo!"], "por")
        >>> result.passed_all
        True
    """

    issues: tuple[Issue, ...] = field(default_factory=tuple)

    @property
    def passed_all(self) -> bool:
        return len(self.issues) == 0

    @property
    def fixable_issues(self) -> tuple[Issue, ...]:
        return tuple(issue for issue in self.issues if issue.auto_fixable)

    def by_line(self) -> dict[int, list[Issue]]:
        """Regroupe les issues par ligne (ordre de détection conservé)."""
        grouped: dict[int, list[Issue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.line_id, []).append(issue)
        return grouped

    def line_ids(self) -> list[int]:
        """Lignes ayant au moins une issue, sans doublon."""
        return list(self.by_line())

    def count_by_severity(self) -> dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts

    def has_severity(self, severity: Severity) -> bool:
        return any(issue.severity is severity for issue in self.issues)

    def __len__(self) -> int:
        return len(self.issues)


@dataclass(frozen=True)
class LintOptions:
    """
    Configuration explicite passée au scan.

    Aucune table n'est gardée en état global : les tests peuvent substituer
    leur propre vocabulaire et plusieurs langues cibles peuvent tourner en
    parallèle.

    Attributes:
        reference_words: Vocabulaire de la langue de référence (minuscules)
        reference_language: Code de la langue de référence (ex: "en")
        punctuation_threshold: Longueur minimale d'une série de ponctuation
        source_language: Langue source de la traduction (optionnel)
        glossary: Termes imposés {terme_source: traduction_attendue}

    Raises:
        ValueError: Si punctuation_threshold < 2
    """

    reference_words: frozenset[str] = DEFAULT_REFERENCE_WORDS
    reference_language: str = DEFAULT_REFERENCE_LANGUAGE
    punctuation_threshold: int = DEFAULT_PUNCTUATION_THRESHOLD
    source_language: str | None = None
    glossary: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.punctuation_threshold < 2:
            raise ValueError(
                f"punctuation_threshold doit être >= 2 (reçu {self.punctuation_threshold})"
            )
        # Normalise en minuscules pour la comparaison insensible à la casse
        object.__setattr__(
            self,
            "reference_words",
            frozenset(word.casefold() for word in self.reference_words),
        )
        object.__setattr__(self, "glossary", dict(self.glossary))


@dataclass(frozen=True)
class ScanContext:
    """
    Contexte partagé par tous les checkers d'un même scan.

    Attributes:
        target_language: Code langue cible (ex: "por", "pt-BR")
        options: Configuration du linter
    """

    target_language: str
    options: LintOptions


class Checker(Protocol):
    """
    Signature d'un checker : inspecte une ligne, retourne 0..n issues.

    Example:
        >>> def check_nothing(line: Line, context: ScanContext) -> list[Issue]:
        ...     return []
    """

    def __call__(self, line: Line, context: ScanContext) -> list[Issue]: ...


class Fixer(Protocol):
    """
    Signature d'un fixer : réécrit le texte d'une ligne à partir des issues
    de son type relevées sur cette ligne.
    """

    def __call__(self, text: str, issues: Sequence[Issue]) -> str: ...
