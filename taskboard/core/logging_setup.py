"""
➡️ But : Configurer les logs de l'application (console + fichier optionnel).

setup_logging() est appelée une seule fois, à la création de l'app.
Chaque module récupère ensuite son logger : logging.getLogger(__name__).

🔹 Avantages :

Les erreurs de base de données sont tracées côté serveur sans fuiter vers le client.

Format unique pour toute l'app (taskboard.*, uvicorn, sqlalchemy).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console lisible :
    - tous les logs taskboard.*
    - uvicorn (accès + erreurs) tel quel
    - le reste (sqlalchemy, warnings...) seulement à partir de WARNING
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith("taskboard") or name.startswith("uvicorn"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    level: str | int = logging.INFO,
    log_dir: Optional[str | Path] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Console handler sur stderr (filtré), et fichier complet si log_dir est fourni.
    Les handlers existants sur le root logger sont remplacés (pas de doublons).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level if isinstance(level, int) else level.upper())
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "taskboard.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # warnings.warn(...) -> logger 'py.warnings'
    logging.captureWarnings(True)
