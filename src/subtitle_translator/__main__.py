"""
Point d'entrée CLI du Quality Gate.

Analyse un fichier texte (une réplique de sous-titre par ligne), affiche le
rapport et, avec --fix, écrit la version auto-corrigée.

Les valeurs par défaut peuvent venir de l'environnement ou d'un fichier .env :
- SUBTITLE_TARGET_LANG : langue cible (ex: "por")
- SUBTITLE_SOURCE_LANG : langue source (ex: "eng")
- SUBTITLE_LOG_DIR : répertoire des logs (défaut: logs)

Codes de sortie : 0 = OK, 1 = issues restantes, 2 = entrée invalide.

Usage:
    python -m subtitle_translator episode01.txt --target por --fix
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from .config import ENV_SOURCE_LANG, ENV_TARGET_LANG, lock_config
from .gate import QualityGate
from .logger import DEFAULT_LOG_FILENAME, get_logger, get_session_log_path
from .quality import DEFAULT_PUNCTUATION_THRESHOLD, LintOptions
from .report import ReportRenderer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subtitle_translator",
        description="Quality Gate des sous-titres traduits (scan + auto-fix).",
    )
    parser.add_argument("input", type=Path, help="Fichier texte, une réplique par ligne")
    parser.add_argument(
        "--target",
        default=os.getenv(ENV_TARGET_LANG, ""),
        help=f"Code langue cible (défaut: ${ENV_TARGET_LANG})",
    )
    parser.add_argument(
        "--source",
        default=os.getenv(ENV_SOURCE_LANG) or None,
        help=f"Code langue source (défaut: ${ENV_SOURCE_LANG})",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_PUNCTUATION_THRESHOLD,
        help="Longueur minimale d'une série de ponctuation signalée",
    )
    parser.add_argument(
        "--glossary",
        type=Path,
        default=None,
        help='Glossaire JSON {"terme source": "traduction imposée"}',
    )
    parser.add_argument("--fix", action="store_true", help="Appliquer l'auto-correction")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Fichier de sortie corrigé (défaut: <input>.fixed.txt)",
    )
    return parser


def load_lines(path: Path) -> list[str]:
    """Lit le fichier en UTF-8, sans les fins de ligne."""
    return path.read_text(encoding="utf-8").splitlines()


def load_glossary(path: Path | None) -> dict[str, str]:
    """
    Charge un glossaire JSON.

    Raises:
        ValueError: Si le contenu n'est pas un objet {str: str}
        OSError: Si le fichier est illisible
    """
    if path is None:
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        raise ValueError(f"Glossaire invalide (objet {{str: str}} attendu): {path}")
    return data


def print_log_location() -> None:
    """Affiche le journal de session s'il a été écrit (créé au premier message)."""
    log_path = get_session_log_path(DEFAULT_LOG_FILENAME)
    if log_path.exists():
        print(f"📄 Journal : {log_path}")


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    lock_config()

    try:
        lines = load_lines(args.input)
        options = LintOptions(
            punctuation_threshold=args.threshold,
            source_language=args.source,
            glossary=load_glossary(args.glossary),
        )
    except (OSError, ValueError) as e:
        # json.JSONDecodeError et UnicodeDecodeError sont des ValueError
        logger.error(f"❌ Entrée invalide: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return 2

    gate = QualityGate(options)
    renderer = ReportRenderer()

    result = gate.inspect(lines, args.target)
    print(renderer.render_quality_report(result, target_language=args.target))

    if result.passed_all or not args.fix:
        print_log_location()
        return 0 if result.passed_all else 1

    outcome = gate.auto_fix(lines, args.target, result)
    print(renderer.render_repair_report(outcome))

    output = args.output or args.input.with_suffix(".fixed.txt")
    output.write_text("\n".join(outcome.repaired) + "\n", encoding="utf-8")
    print(f"💾 Sortie : {output}")
    logger.info(f"💾 Lignes corrigées écrites dans {output}")

    print_log_location()
    return 0 if outcome.after.passed_all else 1


if __name__ == "__main__":
    sys.exit(main())
