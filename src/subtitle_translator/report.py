"""
Rendu des rapports du Quality Gate via templates Jinja2.

Les templates vivent dans le répertoire `templates/` du package ; leurs noms
sont centralisés dans config.TemplateNames.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import TemplateNames
from .quality import Result, Severity

if TYPE_CHECKING:
    from .gate import RepairOutcome

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ReportRenderer:
    """
    Rend les rapports texte affichés par la CLI et l'écran de revue.

    Example:
        >>> renderer = ReportRenderer()
        >>> print(renderer.render_quality_report(result, target_language="por"))
    """

    def __init__(self, template_dir: str | Path = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, **kwargs) -> str:
        """Rend un template avec les variables données."""
        template = self.env.get_template(template_name)
        return template.render(**kwargs)

    def render_quality_report(self, result: Result, target_language: str = "") -> str:
        """
        Rapport d'un scan : une ligne par issue, triée par ligne.

        Args:
            result: Résultat du scan
            target_language: Code langue cible affiché en en-tête

        Returns:
            Rapport texte
        """
        counts = result.count_by_severity()
        return self.render(
            TemplateNames.Quality_Report_Template,
            result=result,
            target_language=target_language,
            counts={severity.value: counts[severity] for severity in Severity},
            fixable_count=len(result.fixable_issues),
        )

    def render_repair_report(self, outcome: "RepairOutcome") -> str:
        """
        Rapport d'auto-correction : avant → après pour chaque ligne modifiée.

        Args:
            outcome: Résultat de QualityGate.auto_fix()

        Returns:
            Rapport texte
        """
        changes = [
            {
                "line_id": line_id,
                "before": outcome.original[line_id - 1],
                "after": outcome.repaired[line_id - 1],
            }
            for line_id in outcome.changed_line_ids
        ]
        return self.render(
            TemplateNames.Repair_Report_Template,
            changes=changes,
            before_count=len(outcome.before),
            after_count=len(outcome.after),
            remaining=outcome.remaining_issues,
        )
