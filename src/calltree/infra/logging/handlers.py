from __future__ import annotations

"""
Logging Handler Factories.

Builds the console and rotating file handlers requested by a
LoggingConfig and tags them, so reconfiguration only ever replaces the
handlers this package installed.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from calltree.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_calltree_handler"


# ==============================================================================
# TAGGING
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as installed by calltree."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# FACTORIES
# ==============================================================================

def build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create every output handler enabled in the configuration.

    A log file that cannot be opened is reported on stderr and skipped;
    console output keeps working.

    Args:
        cfg: Logging configuration.

    Returns:
        List[logging.Handler]: Tagged handlers, possibly empty.
    """
    handlers: List[logging.Handler] = []
    level = cfg.level_int

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        handlers.append(_tag_handler(sh))

    if cfg.log_file:
        fh = _create_rotating_file_handler(cfg)
        if fh is not None:
            handlers.append(fh)

    return handlers


def _create_rotating_file_handler(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the rotating log file, or return None if the path is unusable."""
    log_file = str(cfg.log_file)
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(cfg.level_int)
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return _tag_handler(fh)
