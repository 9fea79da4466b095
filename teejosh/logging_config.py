"""
Configuración básica de logging de la aplicación.

``setup_logging`` configura el logger raíz con un handler de consola y,
opcionalmente, uno de archivo. Solo actúa la primera vez: si el logger
raíz ya tiene handlers (tests, ``create_app`` llamado varias veces) no
hace nada.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configura el logger raíz.

    Parameters
    ----------
    level : str
        Nombre del nivel (``"DEBUG"``, ``"INFO"``...). No distingue
        mayúsculas.
    logfile : Optional[str]
        Ruta de un archivo de log. Si se omite no se agrega handler de
        archivo.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
