"""
Configuration du logging pour subtitle-translator.

Tous les modules obtiennent leur logger via get_logger(__name__) :
- sortie console compatible avec les barres tqdm
- fichier par session dans <logs>/run_YYYYMMDD_HHMMSS/
- fichier et répertoire de session créés au premier message seulement

Le répertoire de base vaut "logs" et peut être remplacé par la variable
d'environnement SUBTITLE_LOG_DIR.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .config import ENV_LOG_DIR, Logger_Level

DEFAULT_LOG_FILENAME = "quality.log"


# ============================================================
# 🔹 Session de logs
# ============================================================


class LogSession:
    """
    Singleton regroupant les logs d'une exécution.

    Le chemin de session est calculé au premier appel ; le répertoire n'est
    créé que lorsqu'un handler écrit réellement.
    """

    _instance: Optional["LogSession"] = None
    _session_dir: Optional[Path] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if LogSession._session_dir is not None:
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_dir = Path(os.getenv(ENV_LOG_DIR) or "logs")
        LogSession._session_dir = base_dir / f"run_{timestamp}"

    @classmethod
    def get_session_dir(cls) -> Path:
        """Retourne le répertoire de la session en cours (non créé)."""
        if cls._session_dir is None:
            cls()
        assert cls._session_dir is not None
        return cls._session_dir

    @classmethod
    def reset(cls):
        """Oublie la session courante (utile pour les tests)."""
        cls._instance = None
        cls._session_dir = None


# ============================================================
# 🔹 Handlers
# ============================================================


class TqdmLoggingHandler(logging.Handler):
    """Écrit sur stderr via tqdm.write() pour ne pas casser les barres."""

    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


class LazyFileHandler(logging.Handler):
    """
    Handler fichier créé au premier message.

    Un scan sans anomalie ne laisse ainsi aucun fichier vide derrière lui.
    """

    def __init__(
        self,
        filename: Path,
        mode: str = "a",
        encoding: str = "utf-8",
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self.filename = filename
        self.mode = mode
        self.encoding = encoding
        self._handler: Optional[logging.FileHandler] = None

    def _resolve_path(self) -> Path:
        return self.filename

    def _ensure_handler(self) -> logging.FileHandler:
        if self._handler is None:
            path = self._resolve_path()
            path.parent.mkdir(parents=True, exist_ok=True)
            self._handler = logging.FileHandler(
                path, mode=self.mode, encoding=self.encoding
            )
            if self.formatter:
                self._handler.setFormatter(self.formatter)
        return self._handler

    def setFormatter(self, fmt):
        super().setFormatter(fmt)
        if self._handler is not None:
            self._handler.setFormatter(fmt)

    def emit(self, record):
        try:
            self._ensure_handler().emit(record)
        except Exception:
            self.handleError(record)

    def close(self):
        if self._handler:
            self._handler.close()
        super().close()


class SessionFileHandler(LazyFileHandler):
    """
    LazyFileHandler dont le répertoire est celui de la session active au
    moment de chaque message (et non à la création du logger).
    """

    def __init__(self, log_filename: str, level: int = logging.NOTSET):
        super().__init__(Path(log_filename), level=level)

    def _resolve_path(self) -> Path:
        return LogSession.get_session_dir() / self.filename.name

    def _ensure_handler(self) -> logging.FileHandler:
        # Session changée (LogSession.reset) : rouvrir dans le nouveau répertoire
        if self._handler is not None and self._handler.baseFilename != os.path.abspath(
            self._resolve_path()
        ):
            self._handler.close()
            self._handler = None
        return super()._ensure_handler()


# ============================================================
# 🔹 Loggers
# ============================================================


def setup_logger(
    name: str,
    log_dir: Optional[str] = None,
    level: int = Logger_Level.level,
    console_level: int = Logger_Level.console_level,
    file_level: int = Logger_Level.file_level,
    log_filename: str = DEFAULT_LOG_FILENAME,
) -> logging.Logger:
    """
    Configure un logger avec sortie console et fichier.

    Args:
        name: Nom du logger (généralement __name__)
        log_dir: Répertoire des logs (None = répertoire de session)
        level: Niveau global du logger
        console_level: Niveau de la sortie console
        file_level: Niveau du fichier
        log_filename: Nom du fichier de log

    Returns:
        Logger configuré (inchangé s'il a déjà des handlers)

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.info("Scan démarré")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    file_handler: LazyFileHandler
    if log_dir is None:
        file_handler = SessionFileHandler(log_filename)
    else:
        file_handler = LazyFileHandler(filename=Path(log_dir) / log_filename)
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str, log_filename: Optional[str] = None) -> logging.Logger:
    """
    Récupère un logger existant ou le configure.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger = get_logger(__name__, "repair.log")
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        return setup_logger(name, log_filename=log_filename or DEFAULT_LOG_FILENAME)
    return logger


def get_session_log_path(filename: str) -> Path:
    """
    Chemin d'un fichier dans le répertoire de session.

    Example:
        >>> get_session_log_path("repair.log")
        PosixPath('logs/run_20260101_120000/repair.log')
    """
    return LogSession.get_session_dir() / filename
