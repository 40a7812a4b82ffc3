# ==================================================================================================
#                                   Logging
# ==================================================================================================
#
# Opt-in logging bootstrap for scripts and notebooks that style charts.
# Library modules only call `logging.getLogger(__name__)` and never touch
# handlers; nothing here runs on import.
#
# The package logger can be given its own level so chart classification and
# palette resolution can be traced at DEBUG without matplotlib's DEBUG chatter.

import logging
from typing import Optional

LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER: str = "phacstyle"


def configure_logging(level: int = logging.INFO, style_level: Optional[int] = None) -> None:
    """
    Configure global logging once.

    Parameters
    ----------
    level
        Root logging level.
    style_level
        Optional level for the `phacstyle` logger only. `logging.DEBUG`
        shows how each chart was classified and which palette variant was
        drawn.

    Usage example
    -------------
        configure_logging(logging.WARNING, style_level=logging.DEBUG)
        styled = phac_style(g)
    """
    # No `force=True`: an embedding application (Jupyter, a web app) may
    # already own the root handlers.
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if style_level is not None:
        logging.getLogger(PACKAGE_LOGGER).setLevel(style_level)
