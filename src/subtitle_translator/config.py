"""
Configuration globale de subtitle-translator.

Chaque classe de configuration est un singleton verrouillable : la CLI
appelle lock_config() une fois les arguments lus, toute modification
ultérieure lève AttributeError.

Les tables du linter (vocabulaire, seuil) ne vivent pas ici : elles passent
par LintOptions.
"""

import logging


class ConfigBase:
    # Attribut de classe pour le singleton
    _instance = None
    _locked: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def lock(self):
        self._locked = True

    def __setattr__(self, name, value):
        if getattr(self, "_locked", False):
            raise AttributeError("Configuration is locked")
        super().__setattr__(name, value)


class TemplateNames(ConfigBase):
    Quality_Report_Template: str = "quality_report.jinja"
    Repair_Report_Template: str = "repair_report.jinja"


class Logger_Level(ConfigBase):
    level: int = logging.INFO
    console_level: int = logging.WARNING
    file_level: int = logging.DEBUG


# Variables d'environnement lues par la CLI (après load_dotenv)
ENV_TARGET_LANG = "SUBTITLE_TARGET_LANG"
ENV_SOURCE_LANG = "SUBTITLE_SOURCE_LANG"
ENV_LOG_DIR = "SUBTITLE_LOG_DIR"


def lock_config():
    """Verrouille la configuration pour empêcher les modifications ultérieures."""
    Logger_Level().lock()
    TemplateNames().lock()
