from __future__ import annotations

import logging
from typing import Optional


def configure_logging(*, debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging level based on CLI flags.

    Precedence:
    - quiet → ERROR
    - debug → DEBUG
    - verbose → INFO
    - default → INFO (installer progress is meant for the CI log)

    Messages are written without timestamps since CI runners already
    prefix every log line with one.
    """

    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    fmt = "%(levelname)s %(name)s: %(message)s" if (debug or verbose) else "%(message)s"
    logging.basicConfig(level=level, format=fmt)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger."""

    return logging.getLogger(name if name is not None else __name__)
