from __future__ import annotations

import logging
from pathlib import Path

from .lib.env import LAYOUT

FALLBACK_LOG_NAME = "install-loader.log"


def configure_logging(
    logs_dir: str | Path,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging into the installer log directory.

    Notes:
    - The log file lives at ``<logs_dir>/installer.log``; the directory is
      created here since nothing earlier in the run does.
    - If the directory cannot be created or the file opened, we fall back to
      a file in the current working directory.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_install_loader_configured", False):
        return getattr(logger, "_install_loader_log_path")

    requested = str(Path(logs_dir) / LAYOUT.log_file)
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    try:
        Path(logs_dir).mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = logging.FileHandler(requested, encoding="utf-8")
        chosen_path = requested
    except OSError:
        chosen_path = str(Path.cwd() / FALLBACK_LOG_NAME)
        file_handler = logging.FileHandler(chosen_path, encoding="utf-8")
    file_handler.setFormatter(fmt)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_install_loader_configured", True)
    setattr(logger, "_install_loader_log_path", chosen_path)

    logging.getLogger(__name__).info(
        "Logging initialized (requested=%s, actual=%s)", requested, chosen_path
    )
    return chosen_path
