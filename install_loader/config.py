from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .lib.env import DISPLAY_FALLBACK, LAYOUT
from .lib.paths import display_string


@dataclass(frozen=True)
class InstallConfig:
    """Every path the installer stages need, derived from one install root."""

    install_root: Path
    install_root_display: str
    logs_dir: Path
    interpreter_path: Path
    is_retry: bool
    server_info_path: Path
    server_info_backup_path: Path

    @classmethod
    def from_root(cls, root: str | Path, is_retry: bool) -> "InstallConfig":
        install_root = Path(root)
        return cls(
            install_root=install_root,
            install_root_display=display_string(install_root, DISPLAY_FALLBACK),
            logs_dir=install_root / LAYOUT.logs_dir,
            interpreter_path=install_root / LAYOUT.interpreter,
            is_retry=is_retry,
            server_info_path=install_root / LAYOUT.server_info,
            server_info_backup_path=install_root / LAYOUT.server_info_backup,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "install_root": str(self.install_root),
            "install_root_display": self.install_root_display,
            "logs_dir": str(self.logs_dir),
            "interpreter_path": str(self.interpreter_path),
            "is_retry": self.is_retry,
            "server_info_path": str(self.server_info_path),
            "server_info_backup_path": str(self.server_info_backup_path),
        }


def resolve(root: str | Path, is_retry: bool) -> InstallConfig:
    """Build the install config for ``root``.

    Pure path composition: nothing is created or checked on disk apart from
    the single lookup behind the display string, so this never raises.
    """

    return InstallConfig.from_root(root, is_retry)
