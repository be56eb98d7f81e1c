from __future__ import annotations

from pathlib import Path


def display_string(path: str | Path, fallback_message: str) -> str:
    """Render ``path`` as an absolute string for display.

    One resolution attempt only. Anything the host filesystem refuses
    (missing path, permission denied, symlink loop) yields
    ``fallback_message`` instead of an exception.
    """

    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError, ValueError):
        return fallback_message
