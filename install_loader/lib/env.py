from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Layout:
    # Relative to the install root. Existing installed trees depend on these.
    logs_dir: str = "INSTALLER_LOGS"
    interpreter: str = "python/python.exe"
    server_info: str = "server-info.json"
    server_info_backup: str = "server-info-old.json"
    log_file: str = "installer.log"


LAYOUT = Layout()

DISPLAY_FALLBACK = "couldn't determine path"
