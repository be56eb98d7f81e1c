from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .config import InstallConfig
from .lib.env import LAYOUT

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    return "json"


def _yaml():
    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError(
            "YAML server-info requested but PyYAML is not available. "
            "Use a .json path or install PyYAML."
        ) from e
    return yaml


def detect_retry(install_root: str | Path) -> bool:
    """A server-info file left under the root means a prior run did not finish."""
    return (Path(install_root) / LAYOUT.server_info).is_file()


def load_server_info(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}

    text = p.read_text(encoding="utf-8")
    if _detect_format(p) == "yaml":
        data = _yaml().safe_load(text) or {}
    else:
        data = json.loads(text)

    if not isinstance(data, dict):
        raise ValueError(f"Server info file must be an object/dict, got {type(data)}")

    return data


def save_server_info(path: str | Path, info: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if _detect_format(p) == "yaml":
        p.write_text(_yaml().safe_dump(info, sort_keys=False) + "\n", encoding="utf-8")
    else:
        p.write_text(json.dumps(info, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def rotate_server_info(config: InstallConfig) -> bool:
    """Move the current server-info aside before a retry run overwrites it.

    Returns True when a file was moved. An older backup is replaced.
    """

    if not config.is_retry:
        return False
    if not config.server_info_path.exists():
        logger.info("Retry requested but %s does not exist; nothing to back up", config.server_info_path)
        return False

    os.replace(config.server_info_path, config.server_info_backup_path)
    logger.info("Moved %s -> %s", config.server_info_path, config.server_info_backup_path)
    return True


def load_previous_server_info(config: InstallConfig) -> Dict[str, Any]:
    if not config.is_retry:
        return {}
    return load_server_info(config.server_info_backup_path)
