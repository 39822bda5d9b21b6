"""
Orchestration du Quality Gate autour du linter pur.

Ce module est le point d'appel du pipeline de traduction et de l'écran de
revue : il lance le scan, applique l'auto-correction puis re-scanne pour
mesurer ce qui reste, et journalise chaque étape.
"""

from dataclasses import dataclass
from typing import Sequence

from .logger import get_logger
from .quality import Issue, LintOptions, Result, Severity, repair, scan

logger = get_logger(__name__)


@dataclass(frozen=True)
class RepairOutcome:
    """
    Résultat d'une auto-correction vérifiée.

    Attributes:
        original: Lignes avant correction
        repaired: Lignes après correction
        before: Scan des lignes originales
        after: Scan des lignes corrigées
    """

    original: tuple[str, ...]
    repaired: tuple[str, ...]
    before: Result
    after: Result

    @property
    def changed_line_ids(self) -> list[int]:
        """Lignes (1-based) dont le texte a changé."""
        return [
            index
            for index, (old, new) in enumerate(zip(self.original, self.repaired), start=1)
            if old != new
        ]

    @property
    def resolved_count(self) -> int:
        return len(self.before) - len(self.after)

    @property
    def remaining_issues(self) -> tuple[Issue, ...]:
        return self.after.issues


class QualityGate:
    """
    Porte qualité appliquée après chaque lot traduit.

    Flux :
    1. inspect() → Result
    2. si échec : auto_fix() → repair() puis re-scan
    3. should_retry() décide si le lot doit être retraduit (issue HIGH)

    Example:
        >>> gate = QualityGate()
        >>> result = gate.inspect(lines, "por")
        >>> if not result.passed_all:
        ...     outcome = gate.auto_fix(lines, "por", result)
        ...     lines = list(outcome.repaired)
    """

    def __init__(self, options: LintOptions | None = None):
        self.options = options or LintOptions()

    def inspect(self, lines: Sequence[str], target_language: str) -> Result:
        """Scanne les lignes et journalise le bilan."""
        result = scan(lines, target_language, self.options)

        if result.passed_all:
            logger.debug(f"✅ Quality Gate: {len(lines)} ligne(s) OK ({target_language})")
            return result

        logger.info(f"⚠️ Quality Gate ({target_language}): {self.summary(result)}")
        for issue in result.issues:
            logger.debug(f"  • {issue}")
        return result

    def auto_fix(
        self,
        lines: Sequence[str],
        target_language: str,
        result: Result | None = None,
    ) -> RepairOutcome:
        """
        Répare les issues corrigeables puis re-scanne le résultat.

        Args:
            lines: Lignes traduites
            target_language: Code langue cible
            result: Scan déjà effectué de `lines` (None = scan ici)

        Returns:
            RepairOutcome avec les deux scans pour comparaison
        """
        before = result if result is not None else self.inspect(lines, target_language)
        repaired = repair(lines, before.issues)
        after = scan(repaired, target_language, self.options)

        outcome = RepairOutcome(
            original=tuple(lines),
            repaired=tuple(repaired),
            before=before,
            after=after,
        )

        logger.info(
            f"🔧 Auto-fix: {len(outcome.changed_line_ids)} ligne(s) modifiée(s), "
            f"{outcome.resolved_count} issue(s) résolue(s), {len(after)} restante(s)"
        )
        if after.fixable_issues:
            # Une correction peut en révéler une autre (ex: "!!)!!" → "!!!!")
            logger.warning(
                f"❌ {len(after.fixable_issues)} issue(s) corrigeable(s) persistent après auto-fix"
            )
        return outcome

    @staticmethod
    def should_retry(result: Result) -> bool:
        """Un lot avec une issue HIGH (balise cassée) doit être retraduit."""
        return result.has_severity(Severity.HIGH)

    @staticmethod
    def summary(result: Result) -> str:
        """
        Bilan d'une ligne, par sévérité.

        Example:
            >>> QualityGate.summary(result)
            '6 issue(s) (HIGH: 1, MED: 3, LOW: 2)'
        """
        if result.passed_all:
            return "aucune issue"
        counts = result.count_by_severity()
        details = ", ".join(f"{severity.value}: {count}" for severity, count in counts.items())
        return f"{len(result)} issue(s) ({details})"
