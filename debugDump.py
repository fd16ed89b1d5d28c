"""Debug output for the library, routed through the standard logging module.

Call setDebug(True) (or set RANKEDVOTE_DEBUG=1 before import) to see what the
methods and voter models are doing.
"""
import logging
import os

__all__ = ["debug", "setDebug", "isDebug", "logger"]

logger = logging.getLogger("rankedvote")
logger.addHandler(logging.NullHandler())

_handler = None


def setDebug(val=True):
    global _handler
    if val:
        if _handler is None:
            _handler = logging.StreamHandler()
            _handler.setFormatter(logging.Formatter("%(levelname)s %(module)s: %(message)s"))
            logger.addHandler(_handler)
        logger.setLevel(logging.DEBUG)
    else:
        if _handler is not None:
            logger.removeHandler(_handler)
            _handler = None
        logger.setLevel(logging.WARNING)


def isDebug():
    return logger.isEnabledFor(logging.DEBUG)


def debug(*args):
    """Log the space-joined args at debug level.

    >>> debug("nobody", "listens")
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(" ".join(str(a) for a in args), stacklevel=2)


if os.environ.get("RANKEDVOTE_DEBUG", "0") == "1":
    setDebug(True)
