from __future__ import annotations

from typing import Optional

from .logsetup import configure_logging as _configure_logging


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Public API (LogSetup)

    Contract:
    - Root logger to stdout (plus optional log_file), format "ts | LEVEL | name | msg".
    - Unknown level names fall back to INFO.
    - Safe to call again; handlers are replaced, not stacked.
    """
    _configure_logging(level, log_file)
