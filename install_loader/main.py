from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import InstallConfig, resolve
from .logging_utils import configure_logging
from .server_info import detect_retry

logger = logging.getLogger(__name__)


DEFAULT_ROOT = "."


def run(
    *,
    root: str | Path = DEFAULT_ROOT,
    retry: Optional[bool] = None,
    log: bool = True,
) -> InstallConfig:
    """Resolve the install config for ``root``.

    ``retry=None`` detects a retry from a server-info file left by a prior run.
    """

    is_retry = detect_retry(root) if retry is None else retry
    config = resolve(root, is_retry)

    if log:
        actual_log_path = configure_logging(config.logs_dir)
        logger.info("Install root: %s", config.install_root_display)
        logger.info("Retry run: %s", config.is_retry)
        logger.info("Log file: %s", actual_log_path)

    return config


def _dump(data: dict, fmt: str) -> str:
    if fmt == "yaml":
        try:
            import yaml  # type: ignore
        except Exception as e:  # pragma: no cover
            raise RuntimeError("PyYAML is required for --format yaml") from e
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="install-loader")
    p.add_argument("--root", default=DEFAULT_ROOT, help="Installation root directory")
    retry = p.add_mutually_exclusive_group()
    retry.add_argument("--retry", dest="retry", action="store_const", const=True, default=None,
                       help="Treat this run as a retry of a failed install")
    retry.add_argument("--no-retry", dest="retry", action="store_const", const=False,
                       help="Treat this run as a fresh install")
    p.add_argument("--format", choices=["json", "yaml"], default="json", help="Output format")
    p.add_argument("--no-log", action="store_true", help="Do not set up installer logging")

    args = p.parse_args(argv)

    config = run(root=args.root, retry=args.retry, log=not args.no_log)
    sys.stdout.write(_dump(config.to_dict(), args.format))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
