"""
Configuration pytest pour les tests subtitle-translator.

Ce fichier contient les fixtures communes à tous les tests.
"""

import pytest

from subtitle_translator.config import Logger_Level, TemplateNames
from subtitle_translator.logger import LogSession


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path, monkeypatch):
    """
    Redirige les logs de session vers un répertoire temporaire.

    Le fichier de session est ouvert au premier message : il atterrit dans
    le tmp_path du premier test qui journalise, jamais dans ./logs.
    """
    monkeypatch.setenv("SUBTITLE_LOG_DIR", str(tmp_path / "logs"))
    LogSession.reset()
    yield
    LogSession.reset()


@pytest.fixture(autouse=True)
def unlocked_config():
    """Remet les singletons de configuration à l'état déverrouillé entre les tests."""
    yield
    for cls in (Logger_Level, TemplateNames):
        object.__setattr__(cls(), "_locked", False)


@pytest.fixture
def scenario_lines():
    """
    Lot traduit en portugais avec un défaut de chaque type.

    Lignes 1 et 6 propres ; 2 balise cassée ; 3 et 7 crochets/parenthèses ;
    4 et 8 ponctuation ; 5 anglais résiduel.
    """
    return [
        "Olá, mundo!",
        "{\\an8Texto sem fechamento",
        "Isto é [colchete incompleto",
        "O que é isso???!!!",
        "Olá mundo, hello friend",
        "Linha normal {\\an8}",
        "Outra linha com ((problema aninhado",
        "Pontos demais........",
    ]
