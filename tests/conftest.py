from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Undo configure_logging() so each test starts with a bare root logger."""

    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        # exact types only; pytest's capture handlers subclass StreamHandler
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for attr in ("_install_loader_configured", "_install_loader_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)
